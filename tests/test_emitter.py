"""
Go emission tests

String quoting, text normalization, and the text of headers, type
definitions and constructors.
"""

import pytest

from nausicaa.lib.bindings import BindingTable
from nausicaa.lib.emitter import (
    ConstructorWriter,
    goString_quote,
    header_render,
    textContent_normalize,
    typeDefinition_render,
)
from nausicaa.lib.names import component_describe
from nausicaa.models import RefEntry, ScopeFrame


@pytest.fixture
def bindings():
    return BindingTable.table_load()


class TestGoStringQuote:
    """Test Go %q-compatible quoting"""

    @pytest.mark.parametrize("text, expected", [
        ("README", '"README"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("tab\there", '"tab\\there"'),
        ("line\nbreak", '"line\\nbreak"'),
        ("bell\a", '"bell\\a"'),
        ("\x00", '"\\x00"'),
        ("\x7f", '"\\x7f"'),
        ("café", '"café"'),
        ("\u00a0", '"\\u00a0"'),
        ("\u200b", '"\\u200b"'),
        ("\U000e0001", '"\\U000e0001"'),
        ("", '""'),
    ])
    def test_quote(self, text, expected):
        """Quote like Go's %q"""
        assert goString_quote(text) == expected


class TestTextContentNormalize:
    """Test whitespace normalization of element text"""

    def test_newlines_removed(self):
        """Newlines vanish rather than becoming spaces"""
        assert textContent_normalize("Hello\nworld") == "Helloworld"

    def test_trimmed(self):
        """Surrounding whitespace is trimmed"""
        assert textContent_normalize("\n    Hello world\n  ") == "Hello world"

    def test_inner_spaces_kept(self):
        """Inner runs of spaces are kept"""
        assert textContent_normalize("  a   b  ") == "a   b"

    def test_nbsp_preserved(self):
        """No-break spaces at the edges are significant"""
        assert textContent_normalize(" \u00a0Hi\u00a0 \n") == "\u00a0Hi\u00a0"

    def test_whitespace_only(self):
        """Whitespace-only text normalizes to empty"""
        assert textContent_normalize(" \n\t \r\n ") == ""


class TestHeader:
    """Test the fixed header of the generated source"""

    def test_package_and_banner(self, bindings):
        """Header starts with package clause and banner"""
        header = header_render("ui", bindings)

        assert header.startswith("package ui\n\n// Code generated by nausicaa. DO NOT EDIT.\n")

    def test_imports_and_anchors(self, bindings):
        """Every import has an anchor type"""
        header = header_render("views", bindings)

        assert '\t"github.com/gowebapi/webapi"\n' in header
        assert '\t"github.com/gowebapi/webapi/html/media"\n' in header
        assert "\t_ *webapi.Document // prevent unused import errors\n" in header
        assert "\t_ *media.HTMLAudioElement\n" in header

    def test_document_handle(self, bindings):
        """Header declares the document handle"""
        header = header_render("views", bindings)

        assert header.endswith("var (\n\t_document = webapi.GetDocument()\n)\n")


class TestTypeDefinition:
    """Test generated struct definitions"""

    def test_no_refs(self, bindings):
        """Component without refs has only the roots field"""
        component = component_describe("attrs.html")

        assert typeDefinition_render(component, [], bindings) == (
            "// source: attrs.html\n"
            "type attrs struct {\n"
            "\troots []*dom.Element\n"
            "}\n"
        )

    def test_ref_field_types(self, bindings):
        """Mapped tags, unmapped tags and includes each get their own type"""
        component = component_describe("Form.html")
        refs = [
            ("link", RefEntry("a", "a0")),
            ("custom", RefEntry("x-thing", "x_thing0")),
            ("icon", RefEntry("include", "include0", "Icon")),
        ]

        definition = typeDefinition_render(component, refs, bindings)

        assert "\tlink *html.HTMLAnchorElement\n" in definition
        assert "\tcustom *dom.Element\n" in definition
        assert "\ticon *Icon\n" in definition
        assert definition.index("link") < definition.index("custom") < definition.index("icon")


class TestConstructorWriter:
    """Test constructor statements and return values"""

    def test_statements_and_return(self, bindings):
        """Constructor text for a small component"""
        component = component_describe("card.html")
        writer = ConstructorWriter(component, bindings)
        writer.element_create("div0", "div")
        writer.attribute_set("div0", "class", "card")
        writer.element_create("p0", "p")
        writer.text_set("p0", "stringliteral0", "Hi")
        writer.child_append("div0", "p0")

        refs = [("body", RefEntry("p", "p0"))]
        rendered = writer.function_render(refs, [ScopeFrame("div", "div0")])

        assert rendered == (
            "func newCard() *card {\n"
            "\tdiv0 := _document.CreateElement(\"div\", nil)\n"
            "\tdiv0.SetAttribute(\"class\", \"card\")\n"
            "\tp0 := _document.CreateElement(\"p\", nil)\n"
            "\tstringliteral0 := \"Hi\"\n"
            "\tp0.SetTextContent(&stringliteral0)\n"
            "\tdiv0.AppendChild(&p0.Node)\n"
            "\treturn &card{\n"
            "\t\tbody: html.HTMLParagraphElementFromJS(p0),\n"
            "\t\troots: []*dom.Element{div0},\n"
            "\t}\n"
            "}\n"
            "\n"
            "func (v *card) Roots() []*dom.Element {\n"
            "\treturn v.roots\n"
            "}\n"
        )

    def test_include_children_appended(self, bindings):
        """Included roots are appended in a loop"""
        writer = ConstructorWriter(component_describe("Page.html"), bindings)
        writer.include_construct("include0", "NewHeader")
        writer.includeRoots_append("main0", "include0")

        assert writer.lines == [
            "\tinclude0 := NewHeader()",
            "\tfor _, r := range include0.roots {",
            "\t\tmain0.AppendChild(&r.Node)",
            "\t}",
        ]

    def test_include_roots_spread(self, bindings):
        """Top-level includes contribute all of their roots, in order"""
        writer = ConstructorWriter(component_describe("Page.html"), bindings)
        roots = [ScopeFrame("div", "div0"), ScopeFrame("include", "include0"), ScopeFrame("p", "p0")]

        rendered = writer.function_render([], roots)

        assert (
            "\tvar roots []*dom.Element\n"
            "\troots = append(roots, div0)\n"
            "\troots = append(roots, include0.roots...)\n"
            "\troots = append(roots, p0)\n"
            "\treturn &Page{\n"
            "\t\troots: roots,\n"
        ) in rendered

    def test_include_ref_not_converted(self, bindings):
        """Included components are stored as-is, not through a converter"""
        writer = ConstructorWriter(component_describe("Page.html"), bindings)
        refs = [("header", RefEntry("include", "include0", "Header"))]

        rendered = writer.function_render(refs, [])

        assert "\t\theader: include0,\n" in rendered
        assert "\t\troots: []*dom.Element{},\n" in rendered
