"""
Test suite for shorthand code tables
"""

import pytest

from ionic_bundle.codes import (
    MODE_CODES,
    PropType,
    normalize_mode_name,
    prop_type_code,
    resolve_mode_name,
)
from ionic_bundle.errors import E_UNKNOWN_MODE, UnknownModeError


class TestModeNames:
    """Test mode name resolution"""

    def test_table(self):
        assert MODE_CODES == {'default': 0, 'ios': 1, 'md': 2, 'wp': 3}

    def test_normalize(self):
        assert normalize_mode_name(' IOS ') == 'ios'
        assert normalize_mode_name(None) == ''
        assert normalize_mode_name('') == ''

    def test_known(self):
        mode = resolve_mode_name('Ios')
        assert mode.known
        assert mode.name == 'ios'
        assert mode.literal() == 1

    def test_unrecognized(self):
        mode = resolve_mode_name('dark')
        assert not mode.known
        assert mode.code is None
        assert mode.literal() == "'dark'"

    def test_unnamed(self):
        mode = resolve_mode_name(None)
        assert not mode.known
        assert mode.literal() == "''"

    def test_strict(self):
        with pytest.raises(UnknownModeError) as exc_info:
            resolve_mode_name('dark', strict=True)
        assert str(exc_info.value).startswith(E_UNKNOWN_MODE)
        assert resolve_mode_name('default', strict=True).code == 0

    def test_strict_accepts_unnamed_mode(self):
        assert resolve_mode_name(None, strict=True).literal() == "''"
        assert resolve_mode_name('  ', strict=True).name == ''


class TestPropTypes:
    """Test prop type codes"""

    def test_coded_types(self):
        assert prop_type_code('boolean') == 0
        assert prop_type_code('number') == 1
        assert prop_type_code(PropType.NUMBER) == 1

    def test_types_without_code(self):
        assert prop_type_code('string') is None
        assert prop_type_code('any') is None

    def test_unrecognized_type_is_omitted(self):
        assert prop_type_code('date') is None
        assert prop_type_code(None) is None
