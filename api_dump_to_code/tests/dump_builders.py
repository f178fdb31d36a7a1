"""Helpers building raw API dump dicts for tests."""

from api_dump_to_code.pipeline.schema_ast import ApiDump, ApiDumpParser


def value_type(category, name):
    return {"Category": category, "Name": name}


def prop(name, type_=("Primitive", "string"), read="None", write="None", tags=None, thread_safety=""):
    return {
        "MemberType": "Property",
        "Name": name,
        "Category": "Data",
        "ValueType": value_type(*type_),
        "Security": {"Read": read, "Write": write},
        "Tags": tags or [],
        "ThreadSafety": thread_safety,
    }


def func(name, params=(), returns=("Primitive", "void"), security="None", tags=None, thread_safety=""):
    return {
        "MemberType": "Function",
        "Name": name,
        "Parameters": [{"Name": p, "Type": value_type(*t)} for p, t in params],
        "ReturnType": value_type(*returns),
        "Security": security,
        "Tags": tags or [],
        "ThreadSafety": thread_safety,
    }


def event(name, params=(), security="None", tags=None):
    return {
        "MemberType": "Event",
        "Name": name,
        "Parameters": [{"Name": p, "Type": value_type(*t)} for p, t in params],
        "Security": security,
        "Tags": tags or [],
    }


def callback(name, params=(), returns=None, security="None", tags=None):
    member = {
        "MemberType": "Callback",
        "Name": name,
        "Parameters": [{"Name": p, "Type": value_type(*t)} for p, t in params],
        "Security": security,
        "Tags": tags or [],
    }
    if returns is not None:
        member["ReturnType"] = value_type(*returns)
    return member


def klass(name, superclass="<<<ROOT>>>", members=(), tags=None):
    return {
        "Name": name,
        "Superclass": superclass,
        "MemoryCategory": "Instances",
        "Tags": tags or [],
        "Members": list(members),
    }


def build_dump(*classes, enums=(), version=1) -> ApiDump:
    raw = {"Classes": list(classes), "Enums": list(enums), "Version": version}
    return ApiDumpParser().parse(raw)
