from importlib.metadata import PackageNotFoundError, version

try:
    version = version("FluentZPL")
except PackageNotFoundError:
    version = "0.0.0"
