from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TokenStream")
except PackageNotFoundError:
    version = "0.0.0"
