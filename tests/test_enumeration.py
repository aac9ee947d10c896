# -*- coding: utf-8 -*-
"""
tests.test_enumeration
~~~~~~~~~~~~~~~~~~~~~~


"""

import re
from enum import Enum, IntEnum
from http import HTTPStatus

import pytest

from propconv import EnumConverter
from propconv.converters.enumeration import parse_enum_reference
from propconv.converters.errors import (
    MalformedValueError,
    MissingValueError,
    NoSuchConstantError,
    NotEnumerationError,
    TypeMismatchError,
    UnresolvableTypeError,
    UnsupportedTypeError,
)


class PizzaStatus(Enum):
    ORDERED = 1
    READY = 2
    DELIVERED = 3


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2


class TestEnumReference:
    @pytest.mark.parametrize(
        "value,reference",
        [
            ("http.HTTPStatus.NOT_FOUND", ("http", "HTTPStatus", "NOT_FOUND")),
            ("re.RegexFlag#IGNORECASE", ("re", "RegexFlag", "IGNORECASE")),
            ("tests.test_enumeration.PizzaStatus#READY", ("tests.test_enumeration", "PizzaStatus", "READY")),
            ("my_app.sub_mod.My_Type.VALUE_2", ("my_app.sub_mod", "My_Type", "VALUE_2")),
        ],
    )
    def test_parse(self, value, reference):
        assert parse_enum_reference(value) == reference

    @pytest.mark.parametrize("value", ["HTTP-HTTPSTATUS#OK", "READY", "http.HTTPStatus#ok", "HTTPStatus.OK", ""])
    def test_parse_malformed(self, value):
        with pytest.raises(MalformedValueError, match="naming conventions"):
            parse_enum_reference(value)


class TestEnumConverter:
    def test_qualified(self, enum_converter):
        assert enum_converter.convert(Enum, "http.HTTPStatus.NOT_FOUND") is HTTPStatus.NOT_FOUND
        assert enum_converter.convert(Enum, "re.RegexFlag#IGNORECASE") is re.RegexFlag.IGNORECASE

    def test_qualified_local(self, enum_converter):
        assert enum_converter.convert(Enum, "tests.test_enumeration.PizzaStatus#READY") is PizzaStatus.READY
        assert enum_converter.convert(PizzaStatus, "tests.test_enumeration.PizzaStatus.DELIVERED") is (
            PizzaStatus.DELIVERED
        )

    def test_member_name(self, enum_converter):
        assert enum_converter.convert(PizzaStatus, "ORDERED") is PizzaStatus.ORDERED
        assert enum_converter.convert(HTTPStatus, " OK ") is HTTPStatus.OK
        assert enum_converter.convert(Weekday, "TUESDAY") is Weekday.TUESDAY

    def test_member_name_unknown(self, enum_converter):
        with pytest.raises(MalformedValueError, match="neither a member of PizzaStatus"):
            enum_converter.convert(PizzaStatus, "COOKING")

    def test_member_name_without_type(self, enum_converter):
        with pytest.raises(MalformedValueError):
            enum_converter.convert(Enum, "READY")

    def test_pass_through(self, enum_converter):
        assert enum_converter.convert(Enum, PizzaStatus.READY) is PizzaStatus.READY
        assert enum_converter.convert(PizzaStatus, PizzaStatus.READY) is PizzaStatus.READY
        assert enum_converter.convert(None, HTTPStatus.OK) is HTTPStatus.OK

    def test_grammar(self, enum_converter):
        with pytest.raises(MalformedValueError):
            enum_converter.convert(Enum, "HTTP-HTTPSTATUS#OK")

    def test_type_mismatch(self, enum_converter):
        with pytest.raises(TypeMismatchError):
            enum_converter.convert(HTTPStatus, "re.RegexFlag#IGNORECASE")

    def test_not_enumeration(self, enum_converter):
        with pytest.raises(NotEnumerationError):
            enum_converter.convert(Enum, "builtins.str#MONDAY")

    def test_unresolvable(self, enum_converter):
        with pytest.raises(UnresolvableTypeError, match="doesn't exist"):
            enum_converter.convert(Enum, "builtins.does.not.exist#MONDAY")

    def test_no_such_constant(self, enum_converter):
        with pytest.raises(NoSuchConstantError):
            enum_converter.convert(Enum, "http.HTTPStatus#NOT_A_STATUS")

    def test_unsupported_type(self, enum_converter):
        with pytest.raises(UnsupportedTypeError):
            enum_converter.convert(int, "http.HTTPStatus#OK")

    def test_missing(self, enum_converter):
        with pytest.raises(MissingValueError):
            enum_converter.convert(PizzaStatus, None)

    def test_to_str(self, enum_converter):
        assert enum_converter.to_str(HTTPStatus.NOT_FOUND) == "NOT_FOUND"
        assert enum_converter.to_str(PizzaStatus.READY) == "READY"
        assert enum_converter.to_str(None) is None

    @pytest.mark.parametrize("member", list(PizzaStatus) + [HTTPStatus.OK, Weekday.MONDAY])
    def test_round_trip(self, enum_converter, member):
        string = enum_converter.to_str(member)
        assert enum_converter.to_str(enum_converter.convert(type(member), string)) == string

    def test_default(self):
        converter = EnumConverter(default="READY")
        assert converter.convert(PizzaStatus, None) is PizzaStatus.READY
        assert converter.convert(PizzaStatus, "COOKING") is PizzaStatus.READY

    def test_default_member(self):
        converter = EnumConverter(default=HTTPStatus.ACCEPTED)
        assert converter.convert(HTTPStatus, "builtins.str#OK") is HTTPStatus.ACCEPTED

    def test_resolver(self):
        resolved = []

        def resolve(name):
            resolved.append(name)
            return {"app.Status": PizzaStatus}.get(name)

        converter = EnumConverter(resolver=resolve)
        assert converter.convert(Enum, "app.Status#READY") is PizzaStatus.READY
        with pytest.raises(UnresolvableTypeError):
            converter.convert(Enum, "app.Unknown#READY")
        assert resolved == ["app.Status", "app.Unknown"]

    def test_resolver_error(self):
        def resolve(name):
            raise ImportError(f"No module named '{name}'")

        converter = EnumConverter(resolver=resolve)
        with pytest.raises(UnresolvableTypeError) as e:
            converter.convert(Enum, "app.Status#READY")
        assert isinstance(e.value.__cause__, ImportError)

    def test_invalid_resolver(self):
        with pytest.raises(TypeError):
            EnumConverter(resolver="pydoc.locate")
