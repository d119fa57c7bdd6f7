"""Tests for the type expression AST and its renderer."""

import pytest

from yag_openapi.core.type_expr import (
    ANY,
    EMPTY_OBJECT,
    NEVER,
    UNKNOWN,
    Field,
    LiteralType,
    ObjectType,
    TypeRenderer,
    array_type,
    field,
    generic_type,
    inline_object_type,
    intersection_type,
    is_identifier,
    literal,
    object_type,
    render_key,
    render_type,
    to_type_name,
    union_type,
)


class TestBuilders:
    """Test the type expression builder helpers."""

    def test_strings_become_literals(self):
        """Test that plain strings are wrapped as literal types."""
        assert union_type(['string', 'number']).members == (
            LiteralType('string'),
            LiteralType('number'),
        )
        assert array_type('string').element == LiteralType('string')
        assert generic_type('Promise', ['void']).arguments == (LiteralType('void'),)

    def test_object_type_from_mapping_keeps_order(self):
        """Test that mapping keys keep their insertion order."""
        obj = object_type({'b': 'string', 'a': 'number'})

        assert [f.name for f in obj.fields] == ['b', 'a']
        assert not obj.inline
        assert all(not f.optional for f in obj.fields)

    def test_object_type_from_fields(self):
        """Test building an object type from explicit fields."""
        obj = inline_object_type([field('id', 'string'), field('tag', 'string', True)])

        assert obj.inline
        assert obj.fields[1] == Field('tag', LiteralType('string'), optional=True)

    def test_structural_equality(self):
        """Test that equal expressions compare equal."""
        assert object_type({'a': 'string'}) == object_type({'a': literal('string')})
        assert object_type() == EMPTY_OBJECT


class TestIsIdentifier:
    """Test identifier detection used for key quoting."""

    @pytest.mark.parametrize('name', ['id', '_private', '$get', 'camelCase', 'a1'])
    def test_identifiers(self, name):
        assert is_identifier(name)

    @pytest.mark.parametrize('name', ['', '1abc', 'x-request-id', '/users', 'a b'])
    def test_non_identifiers(self, name):
        assert not is_identifier(name)


class TestToTypeName:
    """Test mapping of component names to type alias names."""

    @pytest.mark.parametrize(
        'name,expected',
        [
            ('User', 'User'),
            ('Pet.Category', 'Pet_Category'),
            ('my-model', 'my_model'),
            ('1Api', '_1Api'),
            ('$Ref', '$Ref'),
        ],
    )
    def test_mapping(self, name, expected):
        assert to_type_name(name) == expected
        assert is_identifier(to_type_name(name))


class TestRenderKey:
    """Test object key rendering."""

    def test_identifier_key_is_bare(self):
        assert render_key(field('name', 'string')) == 'name'

    def test_optional_marker(self):
        assert render_key(field('name', 'string', optional=True)) == 'name?'

    def test_numeric_key_is_bare(self):
        """Test that status-code style keys stay unquoted."""
        assert render_key(field('200', 'string')) == '200'

    def test_non_identifier_key_is_quoted(self):
        assert render_key(field('X-Request-Id', 'string')) == '"X-Request-Id"'

    def test_forced_quoting(self):
        assert render_key(field('get', 'string', quoted=True)) == '"get"'

    def test_quoted_optional_key(self):
        assert render_key(field('x-id', 'string', optional=True)) == '"x-id"?'


class TestTypeRenderer:
    """Test rendering of type expressions to TypeScript text."""

    def test_keywords(self):
        assert render_type(ANY) == 'any'
        assert render_type(UNKNOWN) == 'unknown'
        assert render_type('string') == 'string'

    def test_union_and_intersection(self):
        assert render_type(union_type(['string', 'number'])) == 'string | number'
        assert render_type(intersection_type(['A', 'B'])) == 'A & B'

    def test_empty_union_is_never(self):
        """Test that a union without members renders as never."""
        assert render_type(union_type([])) == NEVER.text

    def test_single_member_union(self):
        assert render_type(union_type(['string'])) == 'string'

    def test_array_of_union_is_parenthesized(self):
        expr = array_type(union_type(['string', 'number']))

        assert render_type(expr) == '(string | number)[]'

    def test_array_of_single_member_union_is_bare(self):
        assert render_type(array_type(union_type(['string']))) == 'string[]'

    def test_nested_arrays(self):
        assert render_type(array_type(array_type('number'))) == 'number[][]'

    def test_union_inside_intersection_is_parenthesized(self):
        expr = intersection_type([union_type(['A', 'B']), 'C'])

        assert render_type(expr) == '(A | B) & C'

    def test_inline_object(self):
        expr = inline_object_type([field('id', 'string'), field('name', 'string', True)])

        assert render_type(expr) == '{ id: string; name?: string }'

    def test_empty_objects(self):
        assert render_type(EMPTY_OBJECT) == '{}'
        assert render_type(inline_object_type()) == '{}'

    def test_block_object(self):
        """Test that block objects separate members with semicolons only between them."""
        expr = object_type({'a': 'string', 'b': 'number'})

        assert render_type(expr) == '{\n    a: string;\n    b: number\n}'

    def test_nested_block_objects_indent(self):
        expr = object_type({'outer': object_type({'inner': 'boolean'})})

        assert render_type(expr) == (
            '{\n'
            '    outer: {\n'
            '        inner: boolean\n'
            '    }\n'
            '}'
        )

    def test_generic_with_block_argument(self):
        expr = generic_type('Box', ['"x"', object_type({'v': 'number'})])

        assert render_type(expr) == 'Box<"x", {\n    v: number\n}>'

    def test_custom_indent(self):
        renderer = TypeRenderer(indent='  ')

        assert renderer.render(object_type({'a': 'string'})) == '{\n  a: string\n}'

    def test_rendering_is_deterministic(self):
        expr = object_type({'a': union_type(['"x"', '"y"']), 'b': array_type('A')})

        assert render_type(expr) == render_type(expr)

    def test_unsupported_expression(self):
        with pytest.raises(TypeError):
            TypeRenderer().render(ObjectType)
