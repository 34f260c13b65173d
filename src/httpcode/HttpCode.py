class UnknownStatusName(ValueError):
  """Raised when a symbolic name has no entry in the registry."""
  def __init__(self, name: str):
    super().__init__(f"Unknown HTTP status name: {name}")
    self.name = name

class HttpCode:
  __slots__ = ("code", "name")
  def __init__(self, code: int, name: str):
    self.code = code
    self.name = name
  def __setattr__(self, key: str, value) -> None:
    if hasattr(self, key):
      raise AttributeError(f"HttpCode.{key} is read-only")
    super().__setattr__(key, value)
  def __str__(self) -> str:
    return f"{self.code} {self.name}"
  def __repr__(self) -> str:
    return f"HttpCode({self.code}, {self.name})"
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, HttpCode):
      return NotImplemented
    return self.code == other.code and self.name == other.name
  def __hash__(self) -> int:
    return hash((self.code, self.name))
  _by_name: dict[str, "HttpCode"]
  _by_code: dict[int, "HttpCode"]
  @classmethod
  def lookup(cls, name: str) -> "HttpCode":
    """
    Returns the entry whose symbolic name matches `name`, ignoring case.

    Raises:
      UnknownStatusName: no entry carries that name.
    """
    key = name.upper()
    if key in cls._by_name:
      return cls._by_name[key]
    raise UnknownStatusName(name)
  @classmethod
  def resolve(cls, name: str) -> int:
    """Case-insensitive name to numeric code."""
    return cls.lookup(name).code
  @classmethod
  def query(cls, code: int) -> "HttpCode":
    if code in cls._by_code:
      return cls._by_code[code]
    raise ValueError(f"Unknown status code: {code}")
  @classmethod
  def entries(cls) -> list["HttpCode"]:
    return sorted(cls._by_code.values(), key=lambda entry: entry.code)
  # 2xx Success
  SUCCESS     : "HttpCode"
  CREATED     : "HttpCode"
  # 3xx Redirection
  MOVED       : "HttpCode"
  # 4xx Client Error
  UNAUTHORIZED: "HttpCode"

# 2xx Success
HttpCode.SUCCESS      = HttpCode(200, "SUCCESS")
HttpCode.CREATED      = HttpCode(201, "CREATED")
# 3xx Redirection
HttpCode.MOVED        = HttpCode(301, "MOVED")
# 4xx Client Error
HttpCode.UNAUTHORIZED = HttpCode(401, "UNAUTHORIZED")

HttpCode._by_name = {entry.name: entry for entry in vars(HttpCode).values() if isinstance(entry, HttpCode)}
HttpCode._by_code = {entry.code: entry for entry in HttpCode._by_name.values()}
