import json
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Iterable, Mapping, Optional

import attr

from parkmap.shared.errors import ValidationError


def ensure(t, allow_none=False):
    '''Returns a converter that ensures a result of type t
    e.g. ensure(ParkingType)('mall') == ensure(ParkingType)(ParkingType.MALL)

    Enums are looked up by value, so the wire representation can be loaded directly.
    '''
    def check(t2):
        if isinstance(t2, t):
            return t2
        elif allow_none and t2 is None:
            return None
        elif issubclass(t, Enum):
            try:
                return t(t2)
            except ValueError:
                raise ValidationError('{} must be one of: {}'.format(
                    t.__name__, ', '.join(str(e.value) for e in t)))
        elif isinstance(t2, dict):
            return t(**t2)
        else:
            raise TypeError('Expected mapping or {}'.format(t))
    return check


def ensure_list_of(t):
    '''Converter for a list of t, dropping duplicates but keeping the first-seen order.'''
    convert = ensure(t)

    def check(values):
        if values is None:
            return []
        if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
            raise TypeError('Expected a list of {}'.format(t))
        result = []
        for value in values:
            item = convert(value)
            if item not in result:
                result.append(item)
        return result
    return check


def blank_to_none(value):
    '''Optional text: an empty or whitespace-only string means absent.'''
    if isinstance(value, str) and not value.strip():
        return None
    return value


def to_decimal(places: Optional[str] = None, allow_none: bool = False):
    '''Returns a converter to Decimal, optionally quantized to `places` (e.g. '0.01').'''
    def convert(value):
        if allow_none and value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (Decimal, str, int, float)):
            raise ValidationError('Expected a decimal number')
        try:
            number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
            if not number.is_finite():
                raise ValidationError('Decimal value must be finite')
            if places is not None:
                number = number.quantize(Decimal(places))
        except InvalidOperation:
            raise ValidationError('Invalid decimal value')
        return number
    return convert


def to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise ValidationError('Invalid timestamp')
    raise TypeError('Expected a datetime or ISO 8601 string')


def validate_pos(cls, attribute, value: float) -> None:
    if value < 1:
        raise ValidationError('{} must be positive'.format(to_camel(attribute.name)))


def validate_non_neg(cls, attribute, value: float) -> None:
    if value < 0:
        raise ValidationError('{} must be non-negative'.format(to_camel(attribute.name)))


def validate_not_blank(cls, attribute, value: str) -> None:
    if not value.strip():
        raise ValidationError('{} must not be empty'.format(to_camel(attribute.name)))


def validate_range(low: float, high: float):
    def check(cls, attribute, value) -> None:
        if value is not None and not low <= value <= high:
            raise ValidationError('{} must be between {} and {}'.format(to_camel(attribute.name), low, high))
    return check


def enforce_type(cls, attribute, value) -> None:
    # bool is a subclass of int, but never a valid count or id
    if not isinstance(value, attribute.type) or (attribute.type is int and isinstance(value, bool)):
        raise TypeError('{} must be of type {}'
                        .format(attribute.name, str(attribute.type)))


def to_camel(name: str) -> str:
    head, *tail = name.split('_')
    return head + ''.join(part.title() for part in tail)


def to_snake(name: str) -> str:
    return re.sub(r'(?<!^)([A-Z])', r'_\1', name).lower()


def _wire_value(inst, field, value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def model_to_dict(model: object) -> dict:
    '''attr object to a JSON-ready dict with camelCase keys'''
    return {to_camel(k): v for k, v in attr.asdict(model, value_serializer=_wire_value).items()}


def serialize_model(model: object) -> str:
    '''Handy function to dump an attr object to a JSON encoded string'''
    return json.dumps(model_to_dict(model))


def serialize_models(models: Iterable[object]) -> str:
    return json.dumps([model_to_dict(m) for m in models])


def load_model(cls, json_data: dict, err_msg: str, ignore: Iterable[str] = ()) -> object:
    '''Builds an attr object from camelCase wire data.

    Keys naming fields that cannot be passed to the constructor, and keys listed in `ignore`,
    are dropped. Validation errors keep their message; TypeErrors are ugly and become `err_msg`.
    '''
    if not isinstance(json_data, dict):
        raise ValidationError(err_msg)
    skipped = set(ignore) | {a.name for a in attr.fields(cls) if not a.init}
    kwargs = {}
    for key, value in json_data.items():
        name = to_snake(key)
        if name not in skipped:
            kwargs[name] = value
    try:
        return cls(**kwargs)
    except TypeError:
        raise ValidationError(err_msg)
