"""Codecs built from other codecs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .codec_models import (
    ABSENT,
    Codec,
    ContextEntry,
    DecodeFailure,
    DecodeResult,
    SpeckEncodeError,
    append_context,
    failure,
    failures,
    success,
)
from .primitive_codecs import NULL, RefinementCodec, is_unknown_record


class ArrayCodec(Codec):
    """Every element decodes under the item codec."""

    def __init__(self, item: Codec) -> None:
        self.item = item
        self.name = f"Array<{item.name}>"

    def is_instance(self, value: object) -> bool:
        return _is_sequence(value) and all(
            self.item.is_instance(element) for element in value  # type: ignore[attr-defined]
        )

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if not _is_sequence(value):
            return failure(value, context)
        decoded: list[Any] = []
        collected: list[DecodeFailure] = []
        for index, element in enumerate(value):  # type: ignore[arg-type]
            result = self.item.validate(
                element, append_context(context, str(index), self.item, element)
            )
            if result.is_ok:
                decoded.append(result.value)
            else:
                collected.extend(result.failures)
        if collected:
            return failures(collected)
        return success(decoded)

    def encode(self, value: Any) -> Any:
        return [self.item.encode(element) for element in value]


class RecordCodec(Codec):
    """String-keyed mapping whose values all decode under one codec."""

    def __init__(self, key: Codec, value: Codec) -> None:
        self.key = key
        self.value = value
        self.name = f"{{ [K in {key.name}]: {value.name} }}"

    def is_instance(self, value: object) -> bool:
        return is_unknown_record(value) and all(
            self.key.is_instance(key) and self.value.is_instance(item)
            for key, item in value.items()  # type: ignore[attr-defined]
        )

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if not is_unknown_record(value):
            return failure(value, context)
        decoded: dict[str, Any] = {}
        collected: list[DecodeFailure] = []
        for key, item in value.items():  # type: ignore[attr-defined]
            key_result = self.key.validate(key, append_context(context, str(key), self.key, key))
            item_result = self.value.validate(
                item, append_context(context, str(key), self.value, item)
            )
            collected.extend(key_result.failures)
            collected.extend(item_result.failures)
            if key_result.is_ok and item_result.is_ok:
                decoded[key_result.value] = item_result.value  # type: ignore[index]
        if collected:
            return failures(collected)
        return success(decoded)

    def encode(self, value: Any) -> Any:
        return {self.key.encode(key): self.value.encode(item) for key, item in value.items()}


class InterfaceCodec(Codec):
    """Mapping in which every declared field must decode.

    Undeclared fields are passed through untouched; :class:`ExactCodec`
    is what removes them.
    """

    def __init__(self, props: Mapping[str, Codec]) -> None:
        self.props = dict(props)
        self.name = _props_name(self.props)

    def is_instance(self, value: object) -> bool:
        if not is_unknown_record(value):
            return False
        return all(
            codec.is_instance(value.get(key, ABSENT))  # type: ignore[attr-defined]
            for key, codec in self.props.items()
        )

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if not is_unknown_record(value):
            return failure(value, context)
        decoded = dict(value)  # type: ignore[call-overload]
        collected: list[DecodeFailure] = []
        for key, codec in self.props.items():
            actual = decoded.get(key, ABSENT)
            result = codec.validate(actual, append_context(context, key, codec, actual))
            if not result.is_ok:
                collected.extend(result.failures)
            elif result.value is not ABSENT:
                decoded[key] = result.value
        if collected:
            return failures(collected)
        return success(decoded)

    def encode(self, value: Any) -> Any:
        return _encode_props(self.props, value)

    def declared_keys(self) -> frozenset[str] | None:
        return frozenset(self.props)


class PartialCodec(Codec):
    """Mapping in which each declared field may be absent, None, or valid."""

    def __init__(self, props: Mapping[str, Codec]) -> None:
        self.props = {key: nilable(codec) for key, codec in props.items()}
        self.name = f"Partial<{_props_name(self.props)}>"

    def is_instance(self, value: object) -> bool:
        if not is_unknown_record(value):
            return False
        return all(
            codec.is_instance(value[key])  # type: ignore[index]
            for key, codec in self.props.items()
            if key in value  # type: ignore[operator]
        )

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if not is_unknown_record(value):
            return failure(value, context)
        decoded = dict(value)  # type: ignore[call-overload]
        collected: list[DecodeFailure] = []
        for key, codec in self.props.items():
            if key not in decoded:
                continue
            actual = decoded[key]
            result = codec.validate(actual, append_context(context, key, codec, actual))
            if result.is_ok:
                decoded[key] = result.value
            else:
                collected.extend(result.failures)
        if collected:
            return failures(collected)
        return success(decoded)

    def encode(self, value: Any) -> Any:
        return _encode_props(self.props, value)

    def declared_keys(self) -> frozenset[str] | None:
        return frozenset(self.props)


class IntersectionCodec(Codec):
    """Value must satisfy every member; decoded members are merged."""

    def __init__(self, members: Sequence[Codec]) -> None:
        self.members = tuple(members)
        self.name = "(" + " & ".join(member.name for member in self.members) + ")"

    def is_instance(self, value: object) -> bool:
        return all(member.is_instance(value) for member in self.members)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        decoded: list[Any] = []
        collected: list[DecodeFailure] = []
        for index, member in enumerate(self.members):
            result = member.validate(value, append_context(context, str(index), member, value))
            if result.is_ok:
                decoded.append(result.value)
            else:
                collected.extend(result.failures)
        if collected:
            return failures(collected)
        return success(_merge_all(value, decoded))

    def encode(self, value: Any) -> Any:
        return _merge_all(value, [member.encode(value) for member in self.members])

    def declared_keys(self) -> frozenset[str] | None:
        return _combined_keys(self.members)


class UnionCodec(Codec):
    """Value must satisfy at least one member; the first that does wins."""

    def __init__(self, members: Sequence[Codec]) -> None:
        self.members = tuple(members)
        self.name = "(" + " | ".join(member.name for member in self.members) + ")"

    def is_instance(self, value: object) -> bool:
        return any(member.is_instance(value) for member in self.members)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        collected: list[DecodeFailure] = []
        for index, member in enumerate(self.members):
            result = member.validate(value, append_context(context, str(index), member, value))
            if result.is_ok:
                return result
            collected.extend(result.failures)
        return failures(collected)

    def encode(self, value: Any) -> Any:
        for member in self.members:
            if member.is_instance(value):
                return member.encode(value)
        raise SpeckEncodeError("no codec found to encode value in union type")

    def declared_keys(self) -> frozenset[str] | None:
        return _combined_keys(self.members)


class ExactCodec(Codec):
    """Strict wrapper: decodes with the inner codec, then strips unknown keys."""

    def __init__(self, inner: Codec) -> None:
        self.inner = inner
        self.name = inner.name

    def is_instance(self, value: object) -> bool:
        return self.inner.is_instance(value)

    def validate(self, value: object, context: tuple[ContextEntry, ...]) -> DecodeResult:
        if not is_unknown_record(value):
            return failure(value, context)
        result = self.inner.validate(value, context)
        if not result.is_ok:
            return result
        keys = self.inner.declared_keys()
        if keys is None or not isinstance(result.value, Mapping):
            return result
        return success({key: item for key, item in result.value.items() if key in keys})

    def encode(self, value: Any) -> Any:
        return self.inner.encode(value)

    def declared_keys(self) -> frozenset[str] | None:
        return self.inner.declared_keys()


def nilable(codec: Codec) -> Codec:
    """Widen codec so that None and absence are also accepted."""
    return UnionCodec([codec, NULL])


def non_empty_array(item: Codec) -> RefinementCodec:
    return RefinementCodec(ArrayCodec(item), lambda value: len(value) >= 1, "NonEmptyArray")


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _props_name(props: Mapping[str, Codec]) -> str:
    if not props:
        return "{}"
    return "{ " + ", ".join(f"{key}: {codec.name}" for key, codec in props.items()) + " }"


def _encode_props(props: Mapping[str, Codec], value: Any) -> dict[str, Any]:
    encoded = dict(value)
    for key, codec in props.items():
        if key in encoded:
            encoded[key] = codec.encode(encoded[key])
    return encoded


def _merge_all(base: Any, parts: list[Any]) -> Any:
    if not all(isinstance(part, Mapping) for part in parts):
        return parts[-1] if parts else base
    merged = dict(base) if isinstance(base, Mapping) else {}
    for part in parts:
        merged.update(part)
    return merged


def _combined_keys(members: Sequence[Codec]) -> frozenset[str] | None:
    combined: set[str] = set()
    for member in members:
        keys = member.declared_keys()
        if keys is None:
            return None
        combined |= keys
    return frozenset(combined)
