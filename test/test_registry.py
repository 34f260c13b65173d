import pytest

from httpcode.HttpCode import HttpCode, UnknownStatusName

@pytest.mark.parametrize(
  "name, expected",
  [
    ("SUCCESS", 200),
    ("success", 200),
    ("Success", 200),
    ("CREATED", 201),
    ("created", 201),
    ("MOVED", 301),
    ("moved", 301),
    ("mOvEd", 301),
    ("UNAUTHORIZED", 401),
    ("Unauthorized", 401),
  ],
)
def test_resolve(name, expected):
  assert HttpCode.resolve(name) == expected

def test_resolve_is_deterministic():
  assert {HttpCode.resolve("moved") for _ in range(5)} == {301}

@pytest.mark.parametrize("name", ["teapot", "NOTFOUND", "", "SUCCESS ", "OK"])
def test_resolve_unknown(name):
  with pytest.raises(UnknownStatusName) as excinfo:
    HttpCode.resolve(name)
  assert excinfo.value.name == name
  assert isinstance(excinfo.value, ValueError)

def test_lookup_returns_entry():
  assert HttpCode.lookup("created") is HttpCode.CREATED
  assert HttpCode.lookup("Unauthorized") == HttpCode(401, "UNAUTHORIZED")

def test_query_by_code():
  assert HttpCode.query(301) is HttpCode.MOVED
  with pytest.raises(ValueError, match="Unknown status code: 418"):
    HttpCode.query(418)

def test_entries_are_the_fixed_table():
  assert [(entry.name, entry.code) for entry in HttpCode.entries()] == [
    ("SUCCESS", 200),
    ("CREATED", 201),
    ("MOVED", 301),
    ("UNAUTHORIZED", 401),
  ]

def test_entries_are_read_only():
  with pytest.raises(AttributeError):
    HttpCode.SUCCESS.code = 500
  with pytest.raises(AttributeError):
    HttpCode.SUCCESS.reason = "OK"
  assert HttpCode.resolve("SUCCESS") == 200

def test_str_and_repr():
  assert str(HttpCode.MOVED) == "301 MOVED"
  assert repr(HttpCode.MOVED) == "HttpCode(301, MOVED)"
