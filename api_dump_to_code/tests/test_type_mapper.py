import pytest

from api_dump_to_code.pipeline.analyzer.type_mapper import OPAQUE_TYPE, TypeMapper
from api_dump_to_code.pipeline.schema_ast.nodes import ParameterDescriptor, ValueTypeRef


@pytest.fixture
def mapper():
    return TypeMapper()


def params(*types):
    return [ParameterDescriptor(name=f"p{i}", type=ValueTypeRef(category, name)) for i, (category, name) in enumerate(types)]


@pytest.mark.parametrize(
    "category,name,expected",
    [
        ("Primitive", "bool", "bool"),
        ("Primitive", "int64", "long"),
        ("Primitive", "string", "string"),
        ("Primitive", "void", "void"),
        ("Primitive", "null", OPAQUE_TYPE),
        ("DataType", "CFrame", "CFrame"),
        ("DataType", "Color3uint8", "Color3"),
        ("DataType", "ContentId", "string"),
        ("DataType", "Objects", "Instance[]"),
        ("DataType", "buffer", "byte[]"),
        ("DataType", "RBXScriptSignal", "ScriptSignal"),
        ("DataType", "OptionalCoordinateFrame", "CFrame?"),
        ("DataType", "SomeNewDataType", "SomeNewDataType"),
        ("Enum", "Enum.EasingDirection", "EasingDirection"),
        ("Enum", "FrameStyle", "FrameStyle"),
        ("Class", "Tool", "Tool"),
        ("Class", "RBXScriptSignal", "ScriptSignal"),
        ("Group", "Tuple", "object[]"),
        ("Group", "Dictionary", "Dictionary<string, object>"),
        ("Group", "Variant", OPAQUE_TYPE),
        ("Group", "Something", OPAQUE_TYPE),
        ("Unknown", "Whatever", OPAQUE_TYPE),
        ("Primitive", "Function", OPAQUE_TYPE),
        ("Class", "SharedTable", OPAQUE_TYPE),
    ],
)
def test_map_type(mapper, category, name, expected):
    assert mapper.map_type(ValueTypeRef(category, name)) == expected


def test_map_none_is_void(mapper):
    assert mapper.map_type(None) == "void"


class TestNullable:
    """The nullability marker is reapplied to non-opaque results"""

    @pytest.mark.parametrize(
        "category,name,expected",
        [
            ("DataType", "CFrame?", "CFrame?"),
            ("Primitive", "int?", "int?"),
            ("Class", "Instance?", "Instance?"),
            ("Enum", "Enum.Material?", "Material?"),
            ("Group", "Tuple?", "object[]?"),
        ],
    )
    def test_marker_kept(self, mapper, category, name, expected):
        assert mapper.map_type(ValueTypeRef(category, name)) == expected

    @pytest.mark.parametrize("category,name", [("Group", "Variant?"), ("Unknown", "X?"), ("Primitive", "mystery?")])
    def test_opaque_never_nullable(self, mapper, category, name):
        assert mapper.map_type(ValueTypeRef(category, name)) == OPAQUE_TYPE

    def test_no_double_marker(self, mapper):
        assert mapper.map_type(ValueTypeRef("DataType", "OptionalCoordinateFrame?")) == "CFrame?"

    def test_special_names_keep_marker(self, mapper):
        assert mapper.map_type(ValueTypeRef("DataType", "Function?")) == "object?"

    @pytest.mark.parametrize("category,name", [("DataType", "Vector3"), ("Primitive", "float"), ("Enum", "Enum.Font"), ("Class", "Model")])
    def test_nullable_law(self, mapper, category, name):
        plain = mapper.map_type(ValueTypeRef(category, name))
        assert mapper.map_type(ValueTypeRef(category, name + "?")) == plain + "?"


class TestPropertyType:
    def test_class_property_is_nullable(self, mapper):
        assert mapper.map_property_type(ValueTypeRef("Class", "Tool")) == "Tool?"
        assert mapper.map_property_type(ValueTypeRef("Class", "Tool?")) == "Tool?"

    def test_can_be_disabled(self, mapper):
        assert mapper.map_property_type(ValueTypeRef("Class", "Tool"), nullable_classes=False) == "Tool"

    def test_other_categories_unchanged(self, mapper):
        assert mapper.map_property_type(ValueTypeRef("DataType", "Vector3")) == "Vector3"


class TestSignalAndDelegate:
    def test_signal_without_parameters(self, mapper):
        assert mapper.build_signal_type([]) == "ScriptSignal"

    def test_signal_with_parameters(self, mapper):
        assert mapper.build_signal_type(params(("Primitive", "int"), ("Class", "Player"))) == "ScriptSignal<int, Player>"

    def test_action(self, mapper):
        assert mapper.build_delegate_type([], None) == "Action"
        assert mapper.build_delegate_type([], ValueTypeRef("Primitive", "void")) == "Action"
        assert mapper.build_delegate_type(params(("Primitive", "string")), None) == "Action<string>"

    def test_func(self, mapper):
        assert mapper.build_delegate_type([], ValueTypeRef("Primitive", "bool")) == "Func<bool>"
        assert mapper.build_delegate_type(params(("Group", "Tuple")), ValueTypeRef("Group", "Tuple")) == "Func<object[], object[]>"
        assert mapper.build_delegate_type(params(("Class", "Player"), ("Primitive", "int")), ValueTypeRef("Primitive", "bool")) == "Func<Player, int, bool>"
