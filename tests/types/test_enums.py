import pytest

from docview.errors import UnknownTypeTagError
from docview.types.enums import TYPE_NAMES, PropertyType, type_from_name, type_name


class TestPropertyTypeValues:
    def test_codes(self):
        assert PropertyType.UNDEFINED == 0
        assert PropertyType.STRING == 1
        assert PropertyType.BINARY == 2
        assert PropertyType.LONG == 3
        assert PropertyType.DECIMAL == 12

    def test_every_type_has_a_name(self):
        assert set(TYPE_NAMES) == set(PropertyType)


class TestTypeNames:
    @pytest.mark.parametrize(
        ("prop_type", "name"),
        [
            (PropertyType.UNDEFINED, "undefined"),
            (PropertyType.STRING, "String"),
            (PropertyType.BINARY, "Binary"),
            (PropertyType.LONG, "Long"),
            (PropertyType.WEAKREFERENCE, "WeakReference"),
            (PropertyType.URI, "URI"),
        ],
    )
    def test_name_round_trip(self, prop_type, name):
        assert type_name(prop_type) == name
        assert type_from_name(name) is prop_type
        assert prop_type.type_name == name

    def test_type_name_accepts_int(self):
        assert type_name(3) == "Long"

    def test_type_name_rejects_unknown_code(self):
        with pytest.raises(ValueError):
            type_name(99)

    def test_unknown_name(self):
        with pytest.raises(UnknownTypeTagError, match="Unknown property type"):
            type_from_name("Integer")

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TYPE_NAMES[PropertyType.LONG] = "long"  # type: ignore[index]
