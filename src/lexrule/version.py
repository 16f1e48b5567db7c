from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LexRule")
except PackageNotFoundError:
    version = "0.0.0"
