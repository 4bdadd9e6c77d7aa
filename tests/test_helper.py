# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for DocumentHelper and page()."""

from genro_markup import Document, DocumentHelper, MetaElement, page, tag


def tpl(head, body):
    return f'<!DOCTYPE HTML><html><head>{head}</head><body>{body}</body></html>'


def link(rel, href):
    return MetaElement.link().set_attribute('rel', rel).set_attribute('href', href)


class TestConstruction:
    """Tests for creating helpers."""

    def test_default(self):
        """Test a helper over a new document has no doctype."""
        assert DocumentHelper().render() == '<html><head></head><body></body></html>'

    def test_page(self):
        """Test page() equals a helper with the default doctype."""
        assert page().render() == DocumentHelper().set_doctype().render()
        assert page().render() == tpl('', '')

    def test_wraps_existing_document(self):
        """Test the helper writes into the given document."""
        doc = Document()
        helper = DocumentHelper(doc).set_title('x')
        assert helper.document is doc
        assert doc.render() == '<html><head><title>x</title></head><body></body></html>'

    def test_document_methods_chain_on_helper(self):
        """Test forwarded Document calls return the helper."""
        helper = page()
        assert helper.set_language('en') is helper
        assert helper.append_body('text').add_class('js') is helper
        assert helper.render() == (
            '<!DOCTYPE HTML><html lang="en" class="js"><head></head><body>text</body></html>'
        )

    def test_doctype_assignment_reaches_document(self):
        """Test assigning doctype on the helper updates the document."""
        helper = DocumentHelper()
        helper.doctype = '<!DOCTYPE html>'
        assert helper.document.doctype == '<!DOCTYPE html>'
        assert helper.render() == '<!DOCTYPE html><html><head></head><body></body></html>'
        assert page().doctype == '<!DOCTYPE HTML>'

    def test_structural_children(self):
        """Test head and body are reachable through the helper."""
        helper = page()
        assert helper.head is helper.document.head
        assert helper.element is helper.document.element


class TestTitle:
    """Tests for set_title()."""

    def test_title(self):
        """Test a title is added to head."""
        assert page().set_title('Example title').render() == tpl('<title>Example title</title>', '')

    def test_title_not_overwritten(self):
        """Test a second title is added after the first."""
        r = page().set_title('Example title').set_title('foo bar')
        assert r.render() == tpl('<title>Example title</title><title>foo bar</title>', '')


class TestLink:
    """Tests for add_link() and add_stylesheet()."""

    def test_link(self):
        """Test add_link() adds a link to head."""
        r = page().add_link('foo', 'bar')
        assert r.render() == tpl(link('foo', 'bar').render(), '')

    def test_link_attrs(self):
        """Test extra attributes after rel and href."""
        r = page().add_link('foo', 'bar', {'example': 'value'})
        expected = link('foo', 'bar').set_attribute('example', 'value')
        assert r.render() == tpl(expected.render(), '')

    def test_stylesheet(self):
        """Test add_stylesheet() adds a stylesheet link."""
        r = page().add_stylesheet('/test/path.css')
        assert r.render() == tpl('<link rel="stylesheet" href="/test/path.css" />', '')

    def test_stylesheet_attrs(self):
        """Test add_stylesheet() with extra attributes."""
        r = page().add_stylesheet('/test/path.css', {'type': 'text/css'})
        expected = link('stylesheet', '/test/path.css').set_attribute('type', 'text/css')
        assert r.render() == tpl(expected.render(), '')


class TestScript:
    """Tests for add_script()."""

    def test_script(self):
        """Test add_script() adds a script to body."""
        r = page().add_script('/path/src.js')
        expected = tag('script').set_attribute('type', 'application/javascript')
        expected.set_attribute('src', '/path/src.js')
        assert r.render() == tpl('', expected.render())

    def test_script_type(self):
        """Test a custom script type."""
        r = page().add_script('/path/src.js', 'demo/mime-type')
        assert r.render() == tpl('', '<script type="demo/mime-type" src="/path/src.js"></script>')

    def test_script_type_and_attrs(self):
        """Test a custom type with extra attributes."""
        r = page().add_script('/path/src.js', 'demo/mime-type', {'key': 'value', 'boolean': True})
        assert r.render() == tpl(
            '',
            '<script type="demo/mime-type" src="/path/src.js" key="value" boolean></script>',
        )


class TestInlineScript:
    """Tests for add_inline_script()."""

    SCRIPT = 'function(a,b){return a+b}'

    def test_inline_script(self):
        """Test the function is wrapped in an immediate call."""
        r = page().add_inline_script(self.SCRIPT)
        assert r.render() == tpl(
            '',
            f'<script type="application/javascript" charset="utf-8">({self.SCRIPT})()</script>',
        )

    def test_attrs(self):
        """Test extra attributes come after type and charset."""
        r = page().add_inline_script(self.SCRIPT, {'async': True})
        assert r.render() == tpl(
            '',
            f'<script type="application/javascript" charset="utf-8" async>'
            f'({self.SCRIPT})()</script>',
        )

    def test_call_args(self):
        """Test call arguments are joined with a comma and a space."""
        r = page().add_inline_script(self.SCRIPT, {'async': True}, [1, 2])
        assert r.render() == tpl(
            '',
            f'<script type="application/javascript" charset="utf-8" async>'
            f'({self.SCRIPT})(1, 2)</script>',
        )

    def test_empty_attrs_body_only(self):
        """Test the body holds exactly one script with the call text."""
        helper = page().add_inline_script(self.SCRIPT, {}, [1, 2])
        assert len(helper.body.children) == 1
        script = helper.body.children[0]
        assert script.tag == 'script'
        assert script.children == ['(function(a,b){return a+b})(1, 2)']

    def test_type_from_attrs(self):
        """Test a type entry replaces the default type."""
        r = page().add_inline_script('f', {'type': 'module'})
        assert r.render() == tpl('', '<script type="module" charset="utf-8">(f)()</script>')


class TestSetBody:
    """Tests for set_body()."""

    def test_no_attrs(self):
        """Test an empty div is prepended without attributes."""
        assert page().set_body().render() == tpl('', '<div></div>')

    def test_no_attrs_ignores_content(self):
        """Test content is not used without attributes."""
        assert page().set_body(None, tag('main')).render() == tpl('', '<div></div>')

    def test_attrs(self):
        """Test attributes are applied to the div."""
        r = page().set_body({'id': 'demo', 'data-target': 'foo'})
        assert r.render() == tpl('', '<div id="demo" data-target="foo"></div>')

    def test_attrs_and_content(self):
        """Test content becomes the div's children."""
        r = page().set_body({'id': 'demo', 'data-target': 'foo'}, tag('main'))
        assert r.render() == tpl('', '<div id="demo" data-target="foo"><main></main></div>')

    def test_attrs_and_many_content(self):
        """Test several content nodes keep their order."""
        r = page().set_body({'id': 'demo', 'data-target': 'foo'}, tag('header'), tag('main'))
        assert r.render() == tpl(
            '', '<div id="demo" data-target="foo"><header></header><main></main></div>'
        )

    def test_empty_attrs_with_content(self):
        """Test an empty mapping still counts as given."""
        r = page().set_body({}, tag('main'))
        assert r.render() == tpl('', '<div><main></main></div>')

    def test_prepended(self):
        """Test the div goes before existing body content."""
        r = page().add_script('/a.js').set_body({'id': 'app'})
        assert r.render() == tpl(
            '',
            '<div id="app"></div>'
            '<script type="application/javascript" src="/a.js"></script>',
        )
