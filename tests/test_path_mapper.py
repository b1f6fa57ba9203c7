"""Tests for conceptlint.naming.path_mapper — path to constant name mapping."""

from __future__ import annotations

import pytest

from conceptlint.naming.path_mapper import (
    camelize_segment,
    expected_name,
    expected_path,
    in_convention_root,
    strip_convention_root,
    underscore,
)
from conceptlint.naming.qualified_name import QualifiedName


class TestExpectedName:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("concepts/some_file.rb", "::SomeFile"),
            ("app/concepts/top_level.rb", "::TopLevel"),
            ("app/concepts/top_level/nested.rb", "::TopLevel::Nested"),
            (
                "concepts/some_file/another_constant/yet_another_constant.rb",
                "::SomeFile::AnotherConstant::YetAnotherConstant",
            ),
            ("/home/dev/shop/app/concepts/billing/invoice.rb", "::Billing::Invoice"),
        ],
    )
    def test_convention_paths(self, path: str, expected: str) -> None:
        assert str(expected_name(path)) == expected

    def test_strips_through_last_marker(self) -> None:
        assert str(expected_name("app/concepts/old/concepts/billing.rb")) == "::Billing"

    def test_marker_must_be_a_whole_segment(self) -> None:
        assert str(expected_name("myconcepts/billing.rb")) == "::Myconcepts::Billing"

    def test_without_marker_still_yields_a_name(self) -> None:
        assert str(expected_name("app.rb")) == "::App"
        assert str(expected_name("lib/tasks/cleanup.rb")) == "::Lib::Tasks::Cleanup"

    def test_numeric_segment(self) -> None:
        name = expected_name("123.rb")
        assert str(name) == "::123"
        assert name.segments == ("123",)

    def test_extension_only_stripped_as_suffix(self) -> None:
        assert str(expected_name("concepts/robot.rb_backup")) == "::Robot.rbBackup"

    def test_empty_remainder(self) -> None:
        assert expected_name("concepts/.rb") == QualifiedName(("",))

    def test_empty_segments_are_kept(self) -> None:
        assert expected_name("concepts/billing//invoice.rb").segments == (
            "Billing",
            "",
            "Invoice",
        )

    def test_custom_marker_and_extension(self) -> None:
        name = expected_name(
            "src/domain/billing/invoice.rake", root_marker="src/domain", extension=".rake"
        )
        assert str(name) == "::Billing::Invoice"

    def test_deterministic(self) -> None:
        path = "app/concepts/some_folder/file.rb"
        assert expected_name(path) == expected_name(path)

    @pytest.mark.parametrize(
        "segments",
        [("SomeFile",), ("SomeFile", "AnotherConstant"), ("A", "B", "C"), ("HTTPClient",)],
    )
    def test_round_trip_of_capitalised_paths(self, segments: tuple[str, ...]) -> None:
        path = "concepts/" + "/".join(segments) + ".rb"
        assert expected_name(path) == QualifiedName(segments)


class TestCamelizeSegment:
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("some_file", "SomeFile"),
            ("file", "File"),
            ("SomeFile", "SomeFile"),
            ("HTTP_client", "HTTPClient"),
            ("api_v2", "ApiV2"),
            ("123", "123"),
            ("2fa_codes", "2faCodes"),
            ("a__b", "AB"),
            ("_private", "Private"),
            ("trailing_", "Trailing"),
            ("___", ""),
            ("", ""),
            ("kebab-case", "Kebab-case"),
        ],
    )
    def test_cases(self, segment: str, expected: str) -> None:
        assert camelize_segment(segment) == expected


class TestConventionRoot:
    def test_in_root(self) -> None:
        assert in_convention_root("app/concepts/billing.rb")
        assert in_convention_root("concepts/billing.rb")

    def test_outside_root(self) -> None:
        assert not in_convention_root("app/models/user.rb")
        assert not in_convention_root("app/concepts")
        assert not in_convention_root("myconcepts/billing.rb")

    def test_strip(self) -> None:
        assert strip_convention_root("app/concepts/billing/invoice.rb") == "billing/invoice.rb"
        assert strip_convention_root("lib/x.rb") == "lib/x.rb"


class TestReverseMapping:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("SomeFile", "some_file"),
            ("HTTPClient", "http_client"),
            ("ApiV2", "api_v2"),
            ("VERY_LOUD", "very_loud"),
            ("File", "file"),
        ],
    )
    def test_underscore(self, name: str, expected: str) -> None:
        assert underscore(name) == expected

    def test_expected_path(self) -> None:
        name = QualifiedName.parse("::SomeFolder::File")
        assert expected_path(name) == "concepts/some_folder/file.rb"

    def test_expected_path_maps_back(self) -> None:
        name = QualifiedName.parse("::Billing::InvoiceLine")
        assert expected_name(expected_path(name)) == name
