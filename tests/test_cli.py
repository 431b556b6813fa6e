"""Tests for cli.py: exit status, diagnostics and config overrides."""

import pytest
import yaml
from click.testing import CliRunner

from webdir.cli import build_directory_config, main


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def write_config(tmp_path, text):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(text, encoding='utf-8')
    return config_file


class TestMain:

    def test_build_succeeds(self, tmp_path, write_data, records):
        data_file = write_data(records)
        output_dir = tmp_path / 'public'

        result = invoke(
            '--config', str(tmp_path / 'none.yaml'),
            '--data-file', str(data_file),
            '--output-dir', str(output_dir),
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / 'pwd.opml').exists()
        assert (output_dir / 'index.html').exists()
        assert 'No config file' in result.stderr

    def test_validation_error_goes_to_stderr(self, tmp_path, write_data):
        data_file = write_data([
            {'name': 'Bob', 'site': 'https://bob.example'},
            {'name': 'Alice', 'site': 'https://alice.example'},
        ])
        output_dir = tmp_path / 'public'

        result = invoke(
            '--config', str(tmp_path / 'none.yaml'),
            '--data-file', str(data_file),
            '--output-dir', str(output_dir),
        )

        assert result.exit_code == 1
        assert 'ERROR: Alice: entries must be sorted alphabetically by name' in result.stderr
        assert 'ERROR:' not in result.stdout
        assert not output_dir.exists()

    def test_data_format_error_exits_non_zero(self, tmp_path):
        result = invoke(
            '--config', str(tmp_path / 'none.yaml'),
            '--data-file', str(tmp_path / 'missing.yaml'),
            '--output-dir', str(tmp_path / 'public'),
        )
        assert result.exit_code == 1
        assert 'ERROR:' in result.stderr

    def test_check_writes_nothing(self, tmp_path, write_data, records):
        data_file = write_data(records)
        output_dir = tmp_path / 'public'

        result = invoke(
            '--config', str(tmp_path / 'none.yaml'),
            '--data-file', str(data_file),
            '--output-dir', str(output_dir),
            '--check',
        )

        assert result.exit_code == 0, result.output
        assert '2 entries OK' in result.stdout
        assert not output_dir.exists()

    def test_config_file_used(self, tmp_path, write_data, records):
        data_file = write_data(records)
        config_file = write_config(tmp_path, yaml.safe_dump({
            'input': {'data_file': str(data_file)},
            'output': {'dir': str(tmp_path / 'site'), 'html_file': 'directory.html'},
        }))

        result = invoke('--config', str(config_file))

        assert result.exit_code == 0, result.output
        assert (tmp_path / 'site' / 'directory.html').exists()
        assert (tmp_path / 'site' / 'pwd.opml').exists()

    def test_empty_config_section_uses_defaults(self, tmp_path, write_data, records):
        data_file = write_data(records)
        config_file = write_config(tmp_path, f'input:\n  data_file: {data_file}\noutput:\nsite:\n')

        result = invoke('--config', str(config_file), '--output-dir', str(tmp_path / 'site'))

        assert result.exit_code == 0, result.output
        assert (tmp_path / 'site' / 'pwd.opml').exists()
        assert (tmp_path / 'site' / 'index.html').exists()

    def test_wrongly_typed_config_value(self, tmp_path):
        config_file = write_config(tmp_path, 'output:\n  opml_file: [a, b]\n')
        result = invoke('--config', str(config_file))
        assert result.exit_code == 1
        assert 'ERROR: Invalid configuration' in result.stderr
        assert 'opml_file' in result.stderr

    def test_config_section_not_a_mapping(self, tmp_path):
        config_file = write_config(tmp_path, 'site: My Sites\n')
        result = invoke('--config', str(config_file))
        assert result.exit_code == 1
        assert "ERROR: Invalid configuration" in result.stderr
        assert "section 'site' must be a mapping" in result.stderr

    def test_config_file_not_a_mapping(self, tmp_path):
        config_file = write_config(tmp_path, '- not\n- a mapping\n')
        result = invoke('--config', str(config_file))
        assert result.exit_code == 1
        assert 'must hold a mapping' in result.stderr


class TestBuildDirectoryConfig:

    def test_defaults(self):
        config = build_directory_config({}, data_file=None, output_dir=None, debug=False)
        assert config.data_file == 'pwd.yaml'
        assert config.output_dir == '.'
        assert config.opml_file == 'pwd.opml'
        assert config.html_file == 'index.html'
        assert config.debug_mode is False

    def test_cli_overrides_file(self):
        config_data = {'input': {'data_file': 'a.yaml'}, 'output': {'dir': 'out'}}
        config = build_directory_config(config_data, data_file='b.yaml', output_dir='public', debug=True)
        assert config.data_file == 'b.yaml'
        assert config.output_dir == 'public'
        assert config.debug_mode is True

    def test_site_section(self):
        config_data = {'site': {'title': 'Sites', 'irc_url': 'irc://x'}}
        config = build_directory_config(config_data, data_file=None, output_dir=None, debug=False)
        assert config.title == 'Sites'
        assert config.irc_url == 'irc://x'

    def test_empty_sections(self):
        config_data = {'input': None, 'output': None, 'site': None, 'debug': None}
        config = build_directory_config(config_data, data_file=None, output_dir=None, debug=False)
        assert config.data_file == 'pwd.yaml'
        assert config.title == 'HN Personal Websites'

    def test_bad_value_raises(self):
        with pytest.raises(ValueError):
            build_directory_config(
                {'debug': {'enabled': 'sometimes'}}, data_file=None, output_dir=None, debug=False
            )
