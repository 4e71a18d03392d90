pytest_plugins = ["stubble.pytest_plugin", "pytester"]
