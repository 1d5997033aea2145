"""Tests for character pools and password generation."""

from __future__ import annotations

import string

import pytest

from core.password_utils import (
    AMBIGUOUS,
    SYMBOLS,
    EmptyPoolError,
    GenerationOptions,
    InvalidOptionsError,
    PasswordOptionsError,
    build_character_pool,
    draw_from_pool,
    generate_password,
)

NONE = GenerationOptions(
    include_uppercase=False,
    include_lowercase=False,
    include_digits=False,
    include_symbols=False,
)


def only(**flags) -> GenerationOptions:
    base = dict(
        include_uppercase=False,
        include_lowercase=False,
        include_digits=False,
        include_symbols=False,
    )
    base.update(flags)
    return GenerationOptions(**base)


def fixed_bytes(*values):
    def source(n):
        assert n == len(values)
        return bytes(values)
    return source


class TestBuildCharacterPool:
    def test_all_classes_in_fixed_order(self):
        pool = build_character_pool(GenerationOptions())
        assert pool == string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS

    def test_single_class(self):
        assert build_character_pool(only(include_digits=True)) == "0123456789"

    def test_no_class_is_invalid(self):
        with pytest.raises(InvalidOptionsError):
            build_character_pool(NONE)

    def test_no_class_is_invalid_even_with_exclusions(self):
        with pytest.raises(InvalidOptionsError):
            build_character_pool(GenerationOptions(
                include_uppercase=False, include_lowercase=False,
                include_digits=False, include_symbols=False, exclude_chars="abc",
            ))

    def test_all_excluded_is_empty_pool(self):
        opts = only(include_lowercase=True, exclude_chars=string.ascii_lowercase)
        with pytest.raises(EmptyPoolError):
            build_character_pool(opts)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidOptionsError, PasswordOptionsError)
        assert issubclass(EmptyPoolError, ValueError)
        assert InvalidOptionsError().kind == "invalid-options"
        assert EmptyPoolError().kind == "empty-pool"

    def test_exclude_ambiguous(self):
        pool = build_character_pool(GenerationOptions(exclude_ambiguous=True))
        assert not set(AMBIGUOUS) & set(pool)
        assert "o" in pool and "L" in pool

    def test_exclude_chars_removes_every_occurrence(self):
        pool = build_character_pool(only(include_digits=True, exclude_chars="2468"))
        assert pool == "013579"

    @pytest.mark.parametrize("meta", [".", "*", "+", "?", "[", "]", "(", ")", "{", "}", "|", "^", "$", "\\"])
    def test_pattern_metacharacters_are_literal(self, meta):
        pool = build_character_pool(GenerationOptions(exclude_chars=meta))
        expected = build_character_pool(GenerationOptions()).replace(meta, "")
        assert pool == expected

    def test_dot_does_not_wipe_pool(self):
        pool = build_character_pool(only(include_lowercase=True, exclude_chars="."))
        assert pool == string.ascii_lowercase

    def test_ambiguous_and_excluded_both_apply(self):
        pool = build_character_pool(only(include_digits=True, exclude_ambiguous=True, exclude_chars="9"))
        assert pool == "2345678"

    def test_is_valid(self):
        assert GenerationOptions().is_valid()
        assert only(include_symbols=True).is_valid()
        assert not NONE.is_valid()


class TestGeneratePassword:
    def test_correct_length(self):
        for length in (1, 4, 16, 64, 200):
            result = generate_password(length, GenerationOptions())
            assert result.ok
            assert len(result.password) == length

    def test_only_pool_chars(self):
        opts = GenerationOptions(exclude_ambiguous=True, exclude_chars="xyz!")
        pool = set(build_character_pool(opts))
        pw = generate_password(500, opts).password
        assert set(pw) <= pool

    def test_byte_modulo_mapping(self):
        # digits pool has 10 characters
        result = generate_password(5, only(include_digits=True), fixed_bytes(0, 9, 10, 255, 123))
        assert result.password == "09053"

    def test_one_byte_per_character(self):
        requested = []

        def source(n):
            requested.append(n)
            return bytes(n)

        generate_password(12, GenerationOptions(), source)
        assert requested == [12]

    def test_invalid_options_returned_not_raised(self):
        result = generate_password(8, NONE)
        assert not result.ok
        assert result.password is None
        assert isinstance(result.error, InvalidOptionsError)

    def test_empty_pool_returned_not_raised(self):
        result = generate_password(8, only(include_digits=True, exclude_chars="0123456789"))
        assert not result.ok
        assert isinstance(result.error, EmptyPoolError)

    @pytest.mark.parametrize("length", [0, -1, 2.5, True])
    def test_bad_length_raises(self, length):
        with pytest.raises(ValueError):
            generate_password(length, GenerationOptions())

    def test_short_random_source_is_an_error(self):
        with pytest.raises(RuntimeError):
            draw_from_pool(4, "abc", lambda n: b"\x00")
