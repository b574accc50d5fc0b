# src/dirscope/config.py

INDENT_WIDTH = 2

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"

# Console templates
USAGE_MESSAGE = "Proszę podać ścieżkę katalogu jako parametr wywołania programu."
TREE_HEADER = "Zawartość katalogu {path}:"
FILE_LINE = "{indent}{name} ({size} bajtów) {attributes}"
DIRECTORY_LINE = "{indent}{name} ({count} items) {attributes}"
LISTING_ERROR_LINE = "{indent}Błąd przy wyświetlaniu zawartości: {message}"
OLDEST_FILE_LINE = "Najstarszy plik: {name}, Data utworzenia: {timestamp}"
NO_FILES_LINE = "Brak plików w katalogu."
SNAPSHOT_HEADER = "Zawartość kolekcji po deserializacji:"
SNAPSHOT_LINE = "{name} -> {value} B"

# Snapshot wire format
SNAPSHOT_FORMAT = "dirscope.snapshot"
SNAPSHOT_VERSION = 1

# Nothing is excluded unless the user asks for it
DEFAULT_IGNORE_PATTERNS: list[str] = []
