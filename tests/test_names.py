"""
Naming tests

Variable name allocation and the type/constructor names derived from
component file names.
"""

import pytest

from nausicaa.lib.names import (
    NameAllocator,
    component_describe,
    constructorName_derive,
    firstCharacter_upper,
    kind_fromTagName,
    typeName_derive,
)


class TestNameAllocator:
    """Test per-kind ordinal allocation"""

    def test_interleaved_kinds(self):
        """Each kind counts independently, in order of use"""
        namer = NameAllocator()

        assert namer.next("div") == "div0"
        assert namer.next("div") == "div1"
        assert namer.next("span") == "span0"
        assert namer.next("img") == "img0"
        assert namer.next("div") == "div2"
        assert namer.next("img") == "img1"

    def test_fresh_allocator_restarts(self):
        """A new allocator (new component) starts again at 0"""
        first = NameAllocator()
        first.next("p")
        first.next("p")

        assert NameAllocator().next("p") == "p0"

    def test_names_unique(self):
        """No name is handed out twice"""
        namer = NameAllocator()
        names = [namer.next(kind) for kind in ["a", "b", "a", "stringliteral", "a", "b"] * 5]

        assert len(names) == len(set(names))

    def test_kind_ending_in_digit(self):
        """Ordinals that would repeat another kind's name are skipped"""
        namer = NameAllocator()
        names = [namer.next("a_1") for _ in range(11)]

        assert names[-1] == "a_110"
        assert namer.next("a_11") == "a_111"
        assert namer.next("a_1") == "a_112"

    def test_kind_ending_in_digit_reversed(self):
        """The later kind skips ahead whichever kind came first"""
        namer = NameAllocator()
        assert namer.next("a_11") == "a_110"

        names = [namer.next("a_1") for _ in range(11)]

        assert names[9] == "a_19"
        assert names[10] == "a_111"

    def test_hyphenated_tag_kind(self):
        """Custom element names become identifier-safe kinds"""
        assert kind_fromTagName("my-widget") == "my_widget"
        assert kind_fromTagName("div") == "div"


class TestTypeName:
    """Test component type names from file names"""

    @pytest.mark.parametrize("filename, expected", [
        ("Button.html", "Button"),
        ("segmented_control.html", "segmented_control"),
        ("button.v2.html", "button.v2"),
        ("Makefile", "Makefile"),
    ])
    def test_extension_removed(self, filename, expected):
        """Only the final extension goes; case and separators stay"""
        assert typeName_derive(filename) == expected


class TestConstructorName:
    """Test exported/unexported constructor naming"""

    @pytest.mark.parametrize("type_name, expected", [
        ("Button", "NewButton"),
        ("button", "newButton"),
        ("fooBar", "newFooBar"),
        ("F", "NewF"),
        ("f", "newF"),
    ])
    def test_prefix(self, type_name, expected):
        """Upper-case types get New, others new + capitalized name"""
        assert constructorName_derive(type_name) == expected

    @pytest.mark.parametrize("name, expected", [
        ("fooBar", "FooBar"),
        ("FooBar", "FooBar"),
        ("", ""),
        ("f", "F"),
    ])
    def test_first_character_upper(self, name, expected):
        """Only the first character changes"""
        assert firstCharacter_upper(name) == expected


class TestComponentDescribe:
    """Test naming information for a component path"""

    def test_from_path(self):
        """Naming comes from the base name only"""
        component = component_describe("components/forms/Select.html")

        assert component.path == "components/forms/Select.html"
        assert component.type_name == "Select"
        assert component.constructor_name == "NewSelect"
