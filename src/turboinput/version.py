from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TurboInput")
except PackageNotFoundError:
    version = "0.0.0"
