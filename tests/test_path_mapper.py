"""Tests for PathMapper."""

from txgh_sync.services.path_mapper import PathMapper


class TestSlugOf:
    """Tests for slug derivation."""

    def test_slug_strips_filter_match_and_replaces_separators(self, make_config):
        """Test the filter match is removed and / and . become dashes."""
        mapper = PathMapper(make_config(tx_resource_reg=r"\.pot$"))

        assert mapper.slug_of("locale/en/app.pot") == "locale-en-app"

    def test_slug_is_stable(self, make_config):
        """Test repeated calls and separate mappers give the same slug."""
        config = make_config(tx_resource_reg=r"\.<lang>\.json$", tx_resource_ext=".json")
        first = PathMapper(config).slug_of("src/i18n/messages.en.json")
        second = PathMapper(config).slug_of("src/i18n/messages.en.json")

        assert first == second == "src-i18n-messages"

    def test_slug_with_language_directory_filter(self, config):
        """Test the default filter removes the language directory and file name."""
        mapper = PathMapper(config)

        assert mapper.slug_of("locale/en/app.pot") == "locale"

    def test_only_first_match_is_removed(self, make_config):
        """Test a filter matching twice only strips its first occurrence."""
        mapper = PathMapper(make_config(tx_resource_reg="<lang>", tx_resource_ext=".json"))

        assert mapper.slug_of("en/strings.en.json") == "-strings-en-json"


class TestOutputPathOf:
    """Tests for output path derivation."""

    def test_output_path_uses_group_reference(self, config):
        """Test the target template can reuse groups captured by the filter."""
        mapper = PathMapper(config)

        assert mapper.output_path_of("locale/en/app.pot", "fr") == "locale/fr/app.po"

    def test_output_path_substitutes_every_placeholder(self, make_config):
        """Test each <lang> in the template is replaced and nothing else changes."""
        mapper = PathMapper(
            make_config(
                tx_resource_reg=r"\.<lang>\.json$",
                tx_resource_ext=".json",
                tx_target_path="/<lang>/messages.<lang>.json",
            )
        )

        assert mapper.output_path_of("src/i18n/messages.en.json", "pt_BR") == (
            "src/i18n/messages/pt_BR/messages.pt_BR.json"
        )

    def test_output_path_only_replaces_first_match(self, make_config):
        """Test the template replaces the first filter match only."""
        mapper = PathMapper(
            make_config(tx_resource_reg="<lang>", tx_resource_ext=".json", tx_target_path="<lang>")
        )

        assert mapper.output_path_of("en/strings.en.json", "fr") == "fr/strings.en.json"


class TestMatches:
    """Tests for the combined file and extension filter."""

    def test_both_filters_must_match(self, make_config):
        """Test paths are only selected when both filters match."""
        mapper = PathMapper(make_config(tx_resource_reg="/<lang>/"))

        assert mapper.matches("locale/en/app.pot") is True
        assert mapper.matches("locale/en/app.po") is False
        assert mapper.matches("locale/fr/app.pot") is False

    def test_extension_is_matched_literally(self, make_config):
        """Test the dot of the extension does not act as a wildcard."""
        mapper = PathMapper(make_config(tx_resource_reg="<lang>"))

        assert mapper.matches("en/appxpot") is False
        assert mapper.matches("en/app.pot") is True
