import json
import os

CONFIG_FILE = 'config.json'
SUPPORTED_BACKENDS = ('sqlite', 'mysql')

def load_config(config_file=CONFIG_FILE):
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Config file {config_file} does not exist! Make sure it is in: {os.getcwd()}")
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        with open(config_file, 'r', encoding='utf-8') as f:
            lines = f.readlines()
            error_line = lines[e.lineno - 1] if e.lineno <= len(lines) else "Unknown"
        raise ValueError(f"Config file {config_file} is not valid: {str(e)}\nLine {e.lineno}: {error_line.strip()}")

    required_keys = ['DB_BACKEND']
    missing_keys = [key for key in required_keys if key not in config]
    if missing_keys:
        raise KeyError(f"Missing keys in {config_file}: {', '.join(missing_keys)}")

    if config['DB_BACKEND'] not in SUPPORTED_BACKENDS:
        raise ValueError(f"Unknown DB_BACKEND '{config['DB_BACKEND']}', expected one of: {', '.join(SUPPORTED_BACKENDS)}")

    config.setdefault('DB_PATH', 'myproducts.db')
    # Each store call opens its own connection, so an in-memory sqlite db would be empty every time
    if config['DB_BACKEND'] == 'sqlite' and config['DB_PATH'] == ':memory:':
        raise ValueError(f"DB_PATH ':memory:' is not supported in {config_file}, use a file path")
    config.setdefault('MYSQL_HOST', 'localhost')
    config.setdefault('MYSQL_USER', 'root')
    config.setdefault('MYSQL_PASSWORD', '')
    config.setdefault('MYSQL_DATABASE', 'myproducts')
    config.setdefault('APPEARANCE_MODE', 'dark')
    config.setdefault('COLOR_THEME', 'green')
    return config
