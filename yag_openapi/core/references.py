"""Internal $ref dereferencing for OpenAPI documents.

Every ``#/...`` reference is replaced by a copy of the value it points to.
A reference pointing at one of the locations it is nested in (directly or
through earlier references) is left in place, so cyclic schemas end up
rendered by name. External references are not followed.
"""

import logging
from typing import Any

from yag_openapi.exceptions import SchemaReferenceError

__all__ = ['dereference', 'resolve_json_pointer']

logger = logging.getLogger(__name__)


def resolve_json_pointer(document: Any, pointer: str) -> Any:
    """Resolve a JSON pointer (without the leading ``#``) within a document.

    Raises:
        SchemaReferenceError: If any path segment does not exist.
    """
    if not pointer or pointer == '/':
        return document

    current = document
    for part in pointer.lstrip('/').split('/'):
        part = part.replace('~1', '/').replace('~0', '~')
        if isinstance(current, dict):
            if part not in current:
                raise SchemaReferenceError(f'#{pointer}', reason=f"'{part}' not found")
            current = current[part]
        elif isinstance(current, list):
            try:
                current = current[int(part)]
            except (ValueError, IndexError):
                raise SchemaReferenceError(
                    f'#{pointer}', reason=f"'{part}' is not a valid index"
                )
        else:
            raise SchemaReferenceError(f'#{pointer}', reason=f"'{part}' not found")

    return current


def _escape(key: Any) -> str:
    return str(key).replace('~', '~0').replace('/', '~1')


def _within(location: str, ref: str) -> bool:
    return location == ref or location.startswith(ref + '/')


class _Dereferencer:
    def __init__(self, document: dict):
        self.document = document
        self.cycles: set[str] = set()

    def resolve(self, obj: Any, trail: tuple[str, ...], location: str) -> Any:
        if isinstance(obj, dict):
            ref = obj.get('$ref')
            if isinstance(ref, str) and ref.startswith('#'):
                return self._resolve_ref(ref, trail + (location,))
            return {
                key: self.resolve(value, trail, f'{location}/{_escape(key)}')
                for key, value in obj.items()
            }
        if isinstance(obj, list):
            return [
                self.resolve(item, trail, f'{location}/{index}')
                for index, item in enumerate(obj)
            ]
        return obj

    def _resolve_ref(self, ref: str, trail: tuple[str, ...]) -> Any:
        # trail holds the location of this reference and of every reference
        # followed to get here
        if any(_within(location, ref) for location in trail):
            if ref not in self.cycles:
                logger.warning(f'Circular reference left unresolved: {ref}')
                self.cycles.add(ref)
            return {'$ref': ref}

        target = resolve_json_pointer(self.document, ref[1:])
        return self.resolve(target, trail, ref)


def dereference(document: dict) -> dict:
    """Return a copy of ``document`` with internal references inlined.

    Args:
        document: A decoded OpenAPI document.

    Returns:
        A new document; the input is left untouched.

    Raises:
        SchemaReferenceError: If an internal reference does not resolve.
    """
    return _Dereferencer(document).resolve(document, (), '#')
