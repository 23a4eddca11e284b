"""Mapping between source file paths, Transifex slugs and translation paths."""

import re

from txgh_sync.config import LANG_PLACEHOLDER, Config

_SLUG_SEPARATORS = re.compile(r"/|\.")


class PathMapper:
    """Derives resource slugs and output paths from source file paths.

    The file filter is TX_RESOURCE_REG with ``<lang>`` replaced by the source
    language. Both derivations replace only its first match in the path.
    """

    def __init__(self, config: Config):
        self._source_lang = config.tx_resource_lang
        self._target_template = config.tx_target_path
        self._file_filter = re.compile(
            config.tx_resource_reg.replace(LANG_PLACEHOLDER, config.tx_resource_lang)
        )
        self._ext_filter = re.compile(re.escape(config.tx_resource_ext))

    @property
    def source_lang(self) -> str:
        return self._source_lang

    def matches(self, path: str) -> bool:
        """True when the path passes both the file filter and the extension filter."""
        return bool(self._file_filter.search(path)) and bool(self._ext_filter.search(path))

    def slug_of(self, path: str) -> str:
        stem = self._file_filter.sub("", path, count=1)
        return _SLUG_SEPARATORS.sub("-", stem)

    def output_path_of(self, path: str, lang: str) -> str:
        replacement = self._target_template.replace(LANG_PLACEHOLDER, lang)
        return self._file_filter.sub(replacement, path, count=1)
