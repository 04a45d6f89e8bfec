from ctresources.plan_modifiers import BoolDefault, EmptyList


def test_bool_default_descriptions():
    assert BoolDefault(True).description() == "If value is not configured, defaults to true"
    assert (
        BoolDefault(False).markdown_description()
        == "If value is not configured, defaults to `false`"
    )


def test_bool_default_descriptions_follow_default():
    assert BoolDefault(True).description() != BoolDefault(False).description()
    assert BoolDefault(True).description() in BoolDefault(True).markdown_description().replace("`", "")


def test_bool_default_used_when_not_configured():
    assert BoolDefault(True).modify(None, None) is True
    assert BoolDefault(False).modify(None, True) is False


def test_bool_default_keeps_configured_plan():
    assert BoolDefault(True).modify(False, False) is False
    assert BoolDefault(False).modify(True, True) is True


def test_empty_list_descriptions():
    modifier = EmptyList()
    assert modifier.description() == "If value is not configured, defaults to empty list"
    assert modifier.markdown_description() == modifier.description()


def test_empty_list_fills_null_plan():
    assert EmptyList().modify(None, None) == []
    assert EmptyList().modify(["a"], None) == []


def test_empty_list_returns_fresh_lists():
    first = EmptyList().modify(None, None)
    first.append("x")
    assert EmptyList().modify(None, None) == []


def test_empty_list_keeps_plan():
    plan = ["a", "b"]
    assert EmptyList().modify(None, plan) is plan