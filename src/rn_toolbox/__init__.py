__version__ = "3.0.0"

CLI_BIN = "rn-toolbox"
