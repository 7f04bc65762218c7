from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RegLex")
except PackageNotFoundError:
    version = "0.0.0"
