from pathlib import Path

_LANGUAGE_ALIASES = {
    "astro": "astro",
    "blade": "blade",
    "htm": "html",
    "html": "html",
    "javascript": "javascript",
    "javascriptreact": "javascriptreact",
    "js": "javascript",
    "jsx": "javascriptreact",
    "markdown": "markdown",
    "md": "markdown",
    "mdx": "mdx",
    "php": "php",
    "svelte": "svelte",
    "ts": "typescript",
    "tsx": "typescriptreact",
    "typescript": "typescript",
    "typescriptreact": "typescriptreact",
    "vue": "vue",
}

_EXTENSION_LANGUAGE_MAP = {
    ".astro": "astro",
    ".cjs": "javascript",
    ".htm": "html",
    ".html": "html",
    ".js": "javascript",
    ".jsx": "javascriptreact",
    ".md": "markdown",
    ".markdown": "markdown",
    ".mdx": "mdx",
    ".mjs": "javascript",
    ".php": "php",
    ".svelte": "svelte",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".vue": "vue",
}

_SUPPORTED_LANGUAGES = set(_LANGUAGE_ALIASES.values())


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    # blade templates carry a compound suffix
    if file_path.name.lower().endswith(".blade.php"):
        return "blade"
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")


def is_supported_file(path: Path) -> bool:
    return path.suffix.lower() in _EXTENSION_LANGUAGE_MAP
