"""
Type mapper.

Translates API dump value types into C# type expressions. Every unmapped
case degrades to the opaque ``object`` type; mapping never raises.
"""

from __future__ import annotations

from ..schema_ast.nodes import NULLABLE_MARKER, ParameterDescriptor, ValueTypeRef

OPAQUE_TYPE = "object"
VOID_TYPE = "void"
SIGNAL_TYPE = "ScriptSignal"
ACTION_TYPE = "Action"
FUNC_TYPE = "Func"


class TypeMapper:
    """Maps (category, name) value types to C# type strings."""

    # Names that map to the opaque type regardless of category
    SPECIAL_TYPE_MAP = {
        "Function": OPAQUE_TYPE,
        "function": OPAQUE_TYPE,
        "SharedTable": OPAQUE_TYPE,
    }

    PRIMITIVE_TYPE_MAP = {
        "bool": "bool",
        "double": "double",
        "float": "float",
        "int": "int",
        "int64": "long",
        "string": "string",
        "void": VOID_TYPE,
    }

    DATA_TYPE_MAP = {
        "Vector2": "Vector2",
        "Vector3": "Vector3",
        "Vector3int16": "Vector3int16",
        "CFrame": "CFrame",
        "Color3": "Color3",
        "Color3uint8": "Color3",
        "BrickColor": "BrickColor",
        "ColorSequence": "ColorSequence",
        "ColorSequenceKeypoint": "ColorSequenceKeypoint",
        "NumberSequence": "NumberSequence",
        "NumberSequenceKeypoint": "NumberSequenceKeypoint",
        "DateTime": "DateTime",
        "TweenInfo": "TweenInfo",
        "NumberRange": "NumberRange",
        "UDim": "UDim",
        "UDim2": "UDim2",
        "Ray": "Ray",
        "Rect": "Rect",
        "Region3": "Region3",
        "Region3int16": "Region3int16",
        "PhysicalProperties": "PhysicalProperties",
        "Axes": "Axes",
        "Faces": "Faces",
        "Font": "Font",
        "Content": "string",
        "ContentId": "string",
        "SharedString": "string",
        "BinaryString": "string",
        "OptionalCoordinateFrame": "CFrame?",
        "Path2DControlPoint": "Path2DControlPoint",
        "RaycastParams": "RaycastParams",
        "OverlapParams": "OverlapParams",
        "RaycastResult": "RaycastResult",
        "Objects": "Instance[]",
        "Instances": "Instance[]",
        "Function": OPAQUE_TYPE,
        "function": OPAQUE_TYPE,
        "CatalogSearchParams": OPAQUE_TYPE,
        "ProtectedString": "string",
        "QDir": "string",
        "QFont": OPAQUE_TYPE,
        "SystemAddress": "string",
        "UniqueId": "string",
        "OpenCloudModel": OPAQUE_TYPE,
        "buffer": "byte[]",
        "RBXScriptSignal": SIGNAL_TYPE,
        "ScriptSignal": SIGNAL_TYPE,
        "RotationCurveKey": OPAQUE_TYPE,
        "SharedTable": OPAQUE_TYPE,
        "AdReward": OPAQUE_TYPE,
        "ClipEvaluator": OPAQUE_TYPE,
        "FloatCurveKey": OPAQUE_TYPE,
    }

    CLASS_ALIAS_MAP = {
        "RBXScriptSignal": SIGNAL_TYPE,
        "Function": OPAQUE_TYPE,
        "function": OPAQUE_TYPE,
    }

    GROUP_TYPE_MAP = {
        "Variant": OPAQUE_TYPE,
        "Array": "object[]",
        "Dictionary": "Dictionary<string, object>",
        "Map": "Dictionary<string, object>",
        "Tuple": "object[]",
    }

    ENUM_PREFIX = "Enum."

    def map_type(self, value_type: ValueTypeRef | None) -> str:
        """
        Map a value type to a C# type string.

        Args:
            value_type: The value type, or None for "no type"

        Returns:
            C# type string ("void" when value_type is None)
        """
        if value_type is None:
            return VOID_TYPE

        is_nullable = value_type.is_nullable
        base_name = value_type.base_name

        special = self.SPECIAL_TYPE_MAP.get(base_name)
        if special is not None:
            return special + NULLABLE_MARKER if is_nullable else special

        handlers = {
            "Primitive": self._map_primitive,
            "DataType": self._map_data_type,
            "Enum": self._map_enum,
            "Class": self._map_class,
            "Group": self._map_group,
        }
        handler = handlers.get(value_type.category)
        result = handler(base_name) if handler else OPAQUE_TYPE

        if is_nullable and result != OPAQUE_TYPE and not result.endswith(NULLABLE_MARKER):
            result += NULLABLE_MARKER
        return result

    def map_property_type(self, value_type: ValueTypeRef | None, nullable_classes: bool = True) -> str:
        """Map a property type; class-typed properties can be nil at runtime."""
        type_name = self.map_type(value_type)
        if nullable_classes and value_type is not None and value_type.category == "Class" and not type_name.endswith(NULLABLE_MARKER):
            type_name += NULLABLE_MARKER
        return type_name

    def build_signal_type(self, parameters: list[ParameterDescriptor]) -> str:
        """ScriptSignal, or ScriptSignal<T1, ..., TN> for N parameters."""
        if not parameters:
            return SIGNAL_TYPE
        types = [self.map_type(p.type) for p in parameters]
        return f"{SIGNAL_TYPE}<{', '.join(types)}>"

    def build_delegate_type(self, parameters: list[ParameterDescriptor], return_type: ValueTypeRef | None) -> str:
        """Action/Func delegate type for a callback."""
        ret = self.map_type(return_type)
        if not parameters:
            return ACTION_TYPE if ret == VOID_TYPE else f"{FUNC_TYPE}<{ret}>"

        types = [self.map_type(p.type) for p in parameters]
        if ret == VOID_TYPE:
            return f"{ACTION_TYPE}<{', '.join(types)}>"
        types.append(ret)
        return f"{FUNC_TYPE}<{', '.join(types)}>"

    def _map_primitive(self, name: str) -> str:
        return self.PRIMITIVE_TYPE_MAP.get(name, OPAQUE_TYPE)

    def _map_data_type(self, name: str) -> str:
        return self.DATA_TYPE_MAP.get(name, name)

    def _map_enum(self, name: str) -> str:
        # Enums live at the top level of the namespace, unqualified
        if name.startswith(self.ENUM_PREFIX):
            return name[len(self.ENUM_PREFIX) :]
        return name

    def _map_class(self, name: str) -> str:
        return self.CLASS_ALIAS_MAP.get(name, name)

    def _map_group(self, name: str) -> str:
        return self.GROUP_TYPE_MAP.get(name, OPAQUE_TYPE)
