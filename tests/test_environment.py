import pytest

from minishell.environment import Environment


@pytest.fixture
def env():
    return Environment(["PATH=/usr/bin:/bin", "HOME=/home/user", "USER=testuser"])


def test_get_existing(env):
    assert env.get("HOME") == "/home/user"


def test_get_missing(env):
    assert env.get("NOPE") is None


def test_get_prefix_does_not_match(env):
    assert env.get("PAT") is None
    assert env.get("PATH") == "/usr/bin:/bin"


def test_set_new_appends(env):
    env.set("MYTEST", "/home/user/test")
    assert env.get("MYTEST") == "/home/user/test"
    assert env.entries()[-1] == "MYTEST=/home/user/test"
    assert len(env) == 4


def test_set_existing_replaces_in_place(env):
    env.set("HOME", "/tmp")
    assert env.entries()[1] == "HOME=/tmp"
    assert len(env) == 3


def test_assign_new_variable(env):
    assert env.assign("NEWVAR=value") is True
    assert env.get("NEWVAR") == "value"
    assert env.entries()[-1] == "NEWVAR=value"


def test_assign_modifies_existing(env):
    assert env.assign("USER=newuser") is True
    assert env.get("USER") == "newuser"
    assert len(env) == 3


def test_assign_several_keeps_order(env):
    env.assign("VAR1=val1")
    env.assign("VAR2=val2")
    assert env.entries()[-2:] == ["VAR1=val1", "VAR2=val2"]


def test_assign_without_equals_is_ignored(env):
    before = env.entries()
    assert env.assign("TESTVAR") is False
    assert env.entries() == before


def test_assign_value_with_equals(env):
    env.assign("A=b=c")
    assert env.get("A") == "b=c"


def test_remove_existing(env):
    assert env.remove("USER") is True
    assert env.get("USER") is None
    assert len(env) == 2


def test_remove_missing(env):
    before = env.entries()
    assert env.remove("NOTEXIST") is False
    assert env.entries() == before


def test_remove_prefix_keeps_longer_name():
    env = Environment(["PAT=prefix_test", "PATH=/usr/bin", "TERM=xterm"])
    assert env.remove("PAT") is True
    assert env.entries() == ["PATH=/usr/bin", "TERM=xterm"]


def test_remove_with_equals_does_nothing(env):
    assert env.remove("HOME=/home/user") is False
    assert env.get("HOME") == "/home/user"


def test_remove_several(env):
    for name in ("HOME", "PATH"):
        env.remove(name)
    assert env.entries() == ["USER=testuser"]


def test_from_mapping_round_trip():
    mapping = {"A": "1", "B": "two"}
    env = Environment.from_mapping(mapping)
    assert env.entries() == ["A=1", "B=two"]
    assert {name: env.get(name) for name in mapping} == mapping


def test_init_copies_entries():
    source = ["X=1"]
    env = Environment(source)
    env.set("Y", "2")
    assert source == ["X=1"]


def test_entries_is_a_copy(env):
    entries = env.entries()
    entries.append("Z=9")
    assert len(env) == 3


def test_iteration_matches_entries(env):
    assert list(env) == env.entries()


def test_set_then_remove_restores(env):
    before = env.entries()
    env.set("TMPVAR", "x")
    env.remove("TMPVAR")
    assert env.entries() == before