"""Tests for page assembly and filename derivation."""

import pytest

from exporters.page_assembler import PageAssembler, slugify_title
from loaders.entity_index import EntityIndex
from models import ContentfulEntry, ExportSnapshot


def loc(value):
    return {'en-US': value}


def link(entry_id):
    return {'sys': {'type': 'Link', 'linkType': 'Entry', 'id': entry_id}}


def page_entry(entry_id, fields):
    return {'sys': {'id': entry_id, 'contentType': {'sys': {'id': 'page'}}}, 'fields': fields}


def block_entry(entry_id, fields):
    return {'sys': {'id': entry_id, 'contentType': {'sys': {'id': 'contentBlock'}}}, 'fields': fields}


def paragraph_doc(*texts):
    return {'nodeType': 'document', 'data': {}, 'content': [
        {'nodeType': 'paragraph', 'data': {}, 'content': list(texts)}
    ]}


def make_assembler(entries):
    snapshot = ExportSnapshot.from_dict({'entries': entries, 'assets': []})
    index = EntityIndex(snapshot)
    return PageAssembler(index), index


class TestSlugifyTitle:
    """Test filename derivation."""

    @pytest.mark.parametrize('title,expected', [
        ('Hello, World!  2024', 'hello-world-2024'),
        ('Intro', 'intro'),
        ('  --Leading and trailing--  ', 'leading-and-trailing'),
        ('Crème brûlée', 'cr-me-br-l-e'),
        ('!!!', ''),
    ])
    def test_slugify(self, title, expected):
        assert slugify_title(title) == expected

    def test_symbols_only_title_gives_bare_extension(self):
        assembler, index = make_assembler([page_entry('p1', {'title': loc('?!*')})])
        assert assembler.assemble_page(index.find_entry('p1')).filename == '.mdx'


class TestPageAssembler:
    """Test front matter and body assembly."""

    def test_intro_page(self):
        assembler, index = make_assembler([
            page_entry('p1', {
                'title': loc('Intro'),
                'description': loc('Welcome'),
                'content': loc([link('b1')])
            }),
            block_entry('b1', {
                'title': loc('Section A'),
                'content': loc(paragraph_doc(
                    {'nodeType': 'text', 'value': 'Hi ', 'marks': []},
                    {'nodeType': 'text', 'value': 'there', 'marks': [{'type': 'bold'}]}
                ))
            })
        ])

        page = assembler.assemble_page(index.find_entry('p1'))

        assert page.filename == 'intro.mdx'
        assert page.title == 'Intro'
        assert page.content == (
            '---\n'
            'title: "Intro"\n'
            'description: "Welcome"\n'
            '---\n\n'
            '# Intro\n\n'
            'Welcome\n\n'
            '### Section A\n\n'
            'Hi **there**\n\n'
        )

    def test_missing_title_defaults_to_untitled(self):
        assembler, index = make_assembler([page_entry('p1', {})])
        page = assembler.assemble_page(index.find_entry('p1'))

        assert page.filename == 'untitled.mdx'
        assert page.content == '---\ntitle: "Untitled"\n---\n\n# Untitled\n\n'

    def test_empty_title_is_kept(self):
        assembler, index = make_assembler([page_entry('p1', {'title': loc('')})])
        page = assembler.assemble_page(index.find_entry('p1'))

        assert page.title == ''
        assert page.filename == '.mdx'
        assert page.content == '---\ntitle: ""\n---\n\n# \n\n'

    def test_dangling_reference_is_skipped(self):
        assembler, index = make_assembler([
            page_entry('p1', {
                'title': loc('Intro'),
                'description': loc('Welcome'),
                'content': loc([link('does-not-exist')])
            })
        ])

        page = assembler.assemble_page(index.find_entry('p1'))

        assert page.content == (
            '---\ntitle: "Intro"\ndescription: "Welcome"\n---\n\n# Intro\n\nWelcome\n\n'
        )
        assert '###' not in page.content

    def test_blocks_rendered_in_reference_order(self):
        assembler, index = make_assembler([
            page_entry('p1', {'title': loc('Order'), 'content': loc([link('b2'), link('b1')])}),
            block_entry('b1', {'title': loc('First')}),
            block_entry('b2', {'title': loc('Second')}),
        ])

        content = assembler.assemble_page(index.find_entry('p1')).content
        assert content.index('### Second') < content.index('### First')

    def test_block_without_title_has_no_heading(self):
        assembler, index = make_assembler([
            page_entry('p1', {'title': loc('T'), 'content': loc([link('b1')])}),
            block_entry('b1', {'content': loc(paragraph_doc(
                {'nodeType': 'text', 'value': 'body', 'marks': []}
            ))})
        ])

        content = assembler.assemble_page(index.find_entry('p1')).content
        assert content.endswith('# T\n\nbody\n\n')

    def test_block_with_empty_fields_is_skipped(self):
        assembler, index = make_assembler([
            page_entry('p1', {'title': loc('T'), 'content': loc([link('b1')])}),
            block_entry('b1', {})
        ])
        assert assembler.assemble_page(index.find_entry('p1')).content.endswith('# T\n\n')

    def test_other_locale(self):
        snapshot = ExportSnapshot.from_dict({'entries': [
            page_entry('p1', {'title': {'en-US': 'Hello', 'de-DE': 'Hallo'}})
        ]})
        index = EntityIndex(snapshot)
        assembler = PageAssembler(index, locale='de-DE', file_extension='.md')

        page = assembler.assemble_page(index.find_entry('p1'))
        assert page.filename == 'hallo.md'

    def test_malformed_reference_raises(self):
        assembler, index = make_assembler([
            page_entry('p1', {'title': loc('Broken'), 'content': loc([{'id': 'b1'}])})
        ])
        with pytest.raises(KeyError):
            assembler.assemble_page(index.find_entry('p1'))

    def test_entry_helpers(self):
        entry = ContentfulEntry.from_dict(page_entry('p1', {'title': loc('T')}))
        assert entry.is_page()
        assert entry.get_field('missing', default='x') == 'x'
