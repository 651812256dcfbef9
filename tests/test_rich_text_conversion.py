"""Tests for rich text to Markdown conversion."""

import unittest

from converters import convert_rich_text
from converters.rich_text_converter import RichTextConverter
from loaders.entity_index import EntityIndex
from models import ExportSnapshot


def text(value, *marks):
    return {'nodeType': 'text', 'value': value, 'marks': [{'type': m} for m in marks], 'data': {}}


def node(node_type, *children, **data):
    return {'nodeType': node_type, 'content': list(children), 'data': data}


def asset_block(asset_id):
    return {
        'nodeType': 'embedded-asset-block',
        'content': [],
        'data': {'target': {'sys': {'id': asset_id, 'type': 'Link', 'linkType': 'Asset'}}}
    }


def make_index(assets=None, entries=None):
    return EntityIndex(ExportSnapshot.from_dict({'entries': entries or [], 'assets': assets or []}))


class TestTextMarks(unittest.TestCase):
    def setUp(self):
        self.converter = RichTextConverter(make_index())

    def test_plain_text(self):
        self.assertEqual(self.converter.render(text('hello')), 'hello')

    def test_bold(self):
        self.assertEqual(self.converter.render(text('value', 'bold')), '**value**')

    def test_code(self):
        self.assertEqual(self.converter.render(text('value', 'code')), '`value`')

    def test_bold_then_code_nests_in_listed_order(self):
        self.assertEqual(self.converter.render(text('value', 'bold', 'code')), '`**value**`')

    def test_code_then_bold(self):
        self.assertEqual(self.converter.render(text('value', 'code', 'bold')), '**`value`**')

    def test_unknown_marks_are_ignored(self):
        self.assertEqual(self.converter.render(text('value', 'italic', 'underline')), 'value')

    def test_missing_marks(self):
        self.assertEqual(self.converter.render({'nodeType': 'text', 'value': 'x'}), 'x')

    def test_string_mark_is_ignored(self):
        node = {'nodeType': 'text', 'value': 'a', 'marks': ['bold', None, {'type': 'code'}]}
        self.assertEqual(self.converter.render(node), '`a`')

    def test_numeric_values(self):
        self.assertEqual(self.converter.render({'nodeType': 'text', 'value': 0}), '0')
        para = node('paragraph', {'nodeType': 'text', 'value': 42, 'marks': [{'type': 'bold'}]}, text('!'))
        self.assertEqual(self.converter.render(para), '**42**!')

    def test_missing_value(self):
        self.assertEqual(self.converter.render({'nodeType': 'text', 'marks': [{'type': 'bold'}]}), '****')


class TestBlockNodes(unittest.TestCase):
    def setUp(self):
        self.converter = RichTextConverter(make_index())

    def test_document_joins_blocks_with_blank_line(self):
        doc = node('document', node('paragraph', text('a')), node('paragraph', text('b')))
        self.assertEqual(self.converter.render(doc), 'a\n\nb')

    def test_paragraph_concatenates_children(self):
        para = node('paragraph', text('Hi '), text('there', 'bold'))
        self.assertEqual(self.converter.render(para), 'Hi **there**')

    def test_headings(self):
        self.assertEqual(self.converter.render(node('heading-2', text('Two'))), '## Two')
        self.assertEqual(self.converter.render(node('heading-3', text('Three'))), '### Three')

    def test_unordered_list(self):
        lst = node(
            'unordered-list',
            node('list-item', node('paragraph', text('one'))),
            node('list-item', node('paragraph', text('two')))
        )
        self.assertEqual(self.converter.render(lst), '- one\n- two')

    def test_ordered_list_is_numbered_from_one(self):
        lst = node(
            'ordered-list',
            node('list-item', node('paragraph', text('first'))),
            node('list-item', node('paragraph', text('second'))),
            node('list-item', node('paragraph', text('third')))
        )
        self.assertEqual(self.converter.render(lst), '1. first\n2. second\n3. third')

    def test_hyperlink_keeps_uri_verbatim(self):
        link = node('hyperlink', text('docs', 'bold'), uri='https://example.com/a?b=c&d')
        self.assertEqual(self.converter.render(link), '[**docs**](https://example.com/a?b=c&d)')

    def test_hyperlink_without_uri(self):
        link = {'nodeType': 'hyperlink', 'content': [text('x')]}
        self.assertEqual(self.converter.render(link), '[x]()')

    def test_table_is_surrounded_by_blank_lines(self):
        table = node(
            'table',
            node('table-row', node('table-header-cell', node('paragraph', text('A')))),
            node('table-row', node('table-cell', node('paragraph', text('1'))))
        )
        self.assertEqual(self.converter.render(table), '\n\n| A |\n| --- |\n| 1 |\n\n\n')


class TestFallbacks(unittest.TestCase):
    def setUp(self):
        self.converter = RichTextConverter(make_index())

    def test_unknown_node_renders_children(self):
        quote = node('blockquote', node('paragraph', text('quoted')))
        self.assertEqual(self.converter.render(quote), 'quoted')

    def test_unknown_node_without_children(self):
        self.assertEqual(self.converter.render({'nodeType': 'hr', 'data': {}}), '')

    def test_absent_node(self):
        self.assertEqual(self.converter.render(None), '')

    def test_stray_non_node_children_render_empty(self):
        para = node('paragraph', text('a'), 'stray', 7, ['nested'], text('b'))
        self.assertEqual(self.converter.render(para), 'ab')

    def test_stray_child_in_list(self):
        lst = node('unordered-list', node('list-item', text('one')), 'junk')
        self.assertEqual(self.converter.render(lst), '- one\n- ')

    def test_node_without_type_falls_back(self):
        self.assertEqual(self.converter.render({'content': [text('x')]}), 'x')

    def test_empty_document(self):
        self.assertEqual(self.converter.render_document(None), '')
        self.assertEqual(self.converter.render_document({'nodeType': 'document', 'content': []}), '')

    def test_rendering_twice_gives_same_output(self):
        doc = node(
            'document',
            node('heading-2', text('Title')),
            node('ordered-list', node('list-item', node('paragraph', text('a', 'code')))),
            node('paragraph', node('hyperlink', text('link'), uri='/x'))
        )
        self.assertEqual(self.converter.render(doc), self.converter.render(doc))


class TestEmbeddedAssets(unittest.TestCase):
    def _asset(self, asset_id, url=None, title=None):
        fields = {}
        if url is not None:
            fields['file'] = {'en-US': {'url': url, 'fileName': 'a.png'}}
        if title is not None:
            fields['title'] = {'en-US': title}
        return {'sys': {'id': asset_id, 'type': 'Asset'}, 'fields': fields}

    def test_missing_asset_renders_empty(self):
        converter = RichTextConverter(make_index())
        self.assertEqual(converter.render(asset_block('nope')), '')

    def test_asset_without_file_renders_empty(self):
        converter = RichTextConverter(make_index(assets=[self._asset('a1', title='Logo')]))
        self.assertEqual(converter.render(asset_block('a1')), '')

    def test_protocol_relative_url_gets_https(self):
        converter = RichTextConverter(make_index(
            assets=[self._asset('a1', url='//images.example.com/a.png', title='Logo')]
        ))
        self.assertEqual(
            converter.render(asset_block('a1')),
            '\n\n![Logo](https://images.example.com/a.png)\n\n'
        )

    def test_absolute_url_kept_and_title_defaults_to_empty(self):
        converter = RichTextConverter(make_index(
            assets=[self._asset('a1', url='http://cdn.example.com/b.jpg')]
        ))
        self.assertEqual(converter.render(asset_block('a1')), '\n\n![](http://cdn.example.com/b.jpg)\n\n')

    def test_malformed_asset_node_renders_empty(self):
        converter = RichTextConverter(make_index())
        self.assertEqual(converter.render({'nodeType': 'embedded-asset-block'}), '')

    def test_convenience_function(self):
        index = make_index(assets=[self._asset('a1', url='//x.test/i.png', title='I')])
        doc = node('document', node('paragraph', text('before')), asset_block('a1'))
        self.assertEqual(
            convert_rich_text(doc, index),
            'before\n\n\n\n![I](https://x.test/i.png)\n\n'
        )


if __name__ == '__main__':
    unittest.main()
