import pytest

from api_dump_to_code.pipeline.analyzer.security import (
    Accessors,
    Tier,
    build_filtered_model,
    has_visible_members,
    is_member_visible,
    is_token_accessible,
    member_accessors,
    visible_members,
)
from api_dump_to_code.pipeline.schema_ast.nodes import ROOT_SENTINEL
from dump_builders import build_dump, callback, event, func, klass, prop

OPEN = "None"
ELEVATED = "PluginSecurity"
ENGINE = "RobloxSecurity"
FORBIDDEN = "NotAccessibleSecurity"


def single_member(member):
    return build_dump(klass("A", members=[member])).classes[0].members[0]


@pytest.mark.parametrize(
    "read,write,base,elevated",
    [
        (OPEN, OPEN, True, False),
        (OPEN, ELEVATED, True, True),
        (ELEVATED, OPEN, True, True),
        (ELEVATED, ELEVATED, False, True),
        (ENGINE, ENGINE, False, False),
        (FORBIDDEN, FORBIDDEN, False, False),
        (ELEVATED, ENGINE, False, False),
        (FORBIDDEN, ELEVATED, False, False),
        # Open read with engine-only write is base-only
        (OPEN, ENGINE, True, False),
        ("LocalUserSecurity", "LocalUserSecurity", False, False),
        ("LocalUserSecurity", ELEVATED, False, True),
    ],
)
def test_member_visibility(read, write, base, elevated):
    member = single_member(prop("P", read=read, write=write))
    assert is_member_visible(member, Tier.BASE) is base
    assert is_member_visible(member, Tier.ELEVATED) is elevated


@pytest.mark.parametrize("tag", ["Hidden", "NotScriptable"])
@pytest.mark.parametrize("read,write", [(OPEN, OPEN), (ELEVATED, ELEVATED), (OPEN, ELEVATED)])
def test_excluded_tags_hide_member_everywhere(tag, read, write):
    member = single_member(prop("P", read=read, write=write, tags=[tag]))
    assert not is_member_visible(member, Tier.BASE)
    assert not is_member_visible(member, Tier.ELEVATED)


def test_function_event_callback_visibility():
    assert is_member_visible(single_member(func("F")), Tier.BASE)
    assert not is_member_visible(single_member(func("F")), Tier.ELEVATED)
    assert is_member_visible(single_member(event("E", security=ELEVATED)), Tier.ELEVATED)
    assert not is_member_visible(single_member(callback("C", security=ENGINE)), Tier.BASE)


def test_token_accessible():
    assert is_token_accessible(OPEN, Tier.BASE)
    assert not is_token_accessible(ELEVATED, Tier.BASE)
    assert is_token_accessible(OPEN, Tier.ELEVATED)
    assert is_token_accessible(ELEVATED, Tier.ELEVATED)
    assert not is_token_accessible(ENGINE, Tier.ELEVATED)


class TestAccessors:
    """Read/write accessor decisions for properties and callbacks"""

    def test_open_property(self):
        member = single_member(prop("P"))
        assert member_accessors(member, Tier.BASE) == Accessors(True, True)

    def test_read_only_tag(self):
        member = single_member(prop("P", tags=["ReadOnly"]))
        assert member_accessors(member, Tier.BASE) == Accessors(can_read=True, can_write=False)

    def test_write_only_tag(self):
        member = single_member(prop("P", tags=["WriteOnly"]))
        assert member_accessors(member, Tier.BASE) == Accessors(can_read=False, can_write=True)

    def test_split_security(self):
        member = single_member(prop("P", read=OPEN, write=ELEVATED))
        assert member_accessors(member, Tier.BASE) == Accessors(can_read=True, can_write=False)
        assert member_accessors(member, Tier.ELEVATED) == Accessors(can_read=True, can_write=True)

    def test_engine_write_never_gets_setter(self):
        member = single_member(prop("P", read=ELEVATED, write=ENGINE))
        assert member_accessors(member, Tier.ELEVATED) == Accessors(can_read=True, can_write=False)

    def test_callback_uses_accessor_rules(self):
        member = single_member(callback("OnInvoke", security=ELEVATED))
        assert member_accessors(member, Tier.BASE) == Accessors(False, False)
        assert not member_accessors(member, Tier.BASE).any
        assert member_accessors(member, Tier.ELEVATED).any

    def test_functions_report_both_accessors(self):
        member = single_member(func("F", security=ELEVATED))
        assert member_accessors(member, Tier.BASE) == Accessors()


class TestTierExclusivity:
    """A member is never emitted at both tiers"""

    @pytest.mark.parametrize("read", [OPEN, ELEVATED, ENGINE, FORBIDDEN])
    @pytest.mark.parametrize("write", [OPEN, ELEVATED, ENGINE, FORBIDDEN])
    def test_not_both_open_and_elevated_only(self, read, write):
        member = single_member(prop("P", read=read, write=write))
        base = is_member_visible(member, Tier.BASE)
        elevated = is_member_visible(member, Tier.ELEVATED)
        if base and elevated:
            # Both tiers only when the accessors split between open and elevated
            assert {read, write} == {OPEN, ELEVATED}
            assert member_accessors(member, Tier.BASE) != member_accessors(member, Tier.ELEVATED)


def test_visible_members_keep_declaration_order(mini_dump):
    gui_object = mini_dump.get_class("GuiObject")
    names = [m.name for m in visible_members(gui_object, Tier.BASE)]
    assert names == ["Visible", "AbsolutePosition", "Draggable", "Owner", "TweenPosition", "MouseEnter"]
    assert visible_members(gui_object, Tier.ELEVATED) == []


def test_has_visible_members(mini_dump):
    assert has_visible_members(mini_dump.get_class("Widget"), Tier.BASE)
    assert has_visible_members(mini_dump.get_class("Widget"), Tier.ELEVATED)
    assert not has_visible_members(mini_dump.get_class("Orphan"), Tier.BASE)
    assert not has_visible_members(mini_dump.get_class("Orphan"), Tier.ELEVATED)
    assert not has_visible_members(mini_dump.get_class("GizmoTool"), Tier.BASE)


class TestFilteredModel:
    """Filtered (class, member) model used by external consumers"""

    def test_base_model(self, mini_dump):
        model = build_filtered_model(mini_dump, Tier.BASE)
        assert [c.descriptor.name for c in model] == ["BindableFunction", "Frame", "GuiObject", "Instance", "Model", "PVInstance", "Widget"]

        gui_object = next(c for c in model if c.descriptor.name == "GuiObject")
        absolute_position = next(m for m in gui_object.members if m.member.name == "AbsolutePosition")
        assert absolute_position.accessors == Accessors(can_read=True, can_write=False)

    def test_elevated_model(self, mini_dump):
        model = build_filtered_model(mini_dump, Tier.ELEVATED)
        assert [c.descriptor.name for c in model] == ["GizmoTool", "Instance", "Widget"]

    def test_exclude(self, mini_dump):
        model = build_filtered_model(mini_dump, Tier.ELEVATED, frozenset({"Instance", ROOT_SENTINEL}))
        assert [c.descriptor.name for c in model] == ["GizmoTool", "Widget"]

    def test_members_without_accessor_are_dropped(self):
        dump = build_dump(klass("A", members=[prop("P", tags=["ReadOnly", "WriteOnly"]), prop("Q")]))
        model = build_filtered_model(dump, Tier.BASE)
        assert [m.member.name for m in model[0].members] == ["Q"]
