#!/usr/bin/env python
# -*- coding: utf-8 -*-

import configparser
import logging
import os
import pytest

from pydeferred.common import config

"""### TEST CASES ###
    ## load
    config file exist
    config file does not exist

    ##get
    key does not exist
    get a bool value
    get a bool with invalid value
    get a dict
    get a dict with invalid value
    get a key not present in file

    ##set
    set a not existing key
    set a dict value
    set with existing file
"""


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Use a fresh parser and a config file in a temporary folder."""
    parser = configparser.ConfigParser()
    parser.add_section('config')
    path = str(tmp_path / 'pydeferred.ini')
    monkeypatch.setattr(config, '_config_parser', parser)
    monkeypatch.setattr(config, '_config_file_path', path)
    return path


class TestConfigLoad(object):

    def test_load_without_existing_file(self, caplog):
        with caplog.at_level(logging.WARNING):
            config.load()
        assert 'Unable to load config file' in caplog.text

    def test_load_with_existing_file(self, config_file, caplog):
        with open(config_file, 'w') as f:
            f.write('[config]\ndebug_mode = true\n')

        with caplog.at_level(logging.WARNING):
            config.load()
        assert caplog.text == ''
        assert config.get('debug_mode') is True

    def test_load_another_file(self, tmp_path):
        other_path = str(tmp_path / 'other.ini')
        with open(other_path, 'w') as f:
            f.write('[config]\nlog_callback_traceback = no\n')

        config.load(other_path)
        assert config.get('log_callback_traceback') is False
        assert config._get_config_file_path() == other_path


class TestConfigGet(object):

    def test_key_does_not_exist(self):
        with pytest.raises(KeyError):
            config.get('plop')

    def test_default_values(self):
        assert config.get('debug_mode') is False
        assert config.get('log_levels') == {}
        assert config.get('log_callback_traceback') is True

    def test_get_a_bool_value(self):
        config.set('debug_mode', True)
        assert config.get('debug_mode') is True

        config.set('debug_mode', 'False')
        assert config.get('debug_mode') is False

    def test_get_a_bool_with_invalid_value(self, caplog):
        config._config_parser.set('config', 'debug_mode', 'plop')
        with caplog.at_level(logging.WARNING):
            assert config.get('debug_mode') is False
        assert 'debug_mode' in caplog.text

    def test_get_a_dict_value(self):
        config.set('log_levels', 'aa=bb;cc=dd')
        assert config.get('log_levels') == {'aa': 'bb', 'cc': 'dd'}

    def test_get_a_dict_with_invalid_value(self, caplog):
        config._config_parser.set('config', 'log_levels', 'plop;toto=tata')
        with caplog.at_level(logging.WARNING):
            value = config.get('log_levels')
        assert value == {'toto': 'tata'}
        assert 'plop' in caplog.text


class TestConfigSet(object):

    def test_key_does_not_exist(self):
        with pytest.raises(KeyError):
            config.set('plop', 42)

    def test_set_a_dict(self):
        config.set('log_levels', {'pydeferred': 'DEBUG'})
        assert config.get('log_levels') == {'pydeferred': 'DEBUG'}

    def test_set_writes_the_file(self, config_file):
        config.set('debug_mode', True)
        config.set('log_levels', 'pydeferred=INFO')
        assert os.path.exists(config_file)

        parser = configparser.ConfigParser()
        parser.read(config_file)
        assert parser.getboolean('config', 'debug_mode') is True
        assert parser.get('config', 'log_levels') == 'pydeferred=INFO'

    def test_set_in_unwritable_location(self, tmp_path, monkeypatch, caplog):
        path = str(tmp_path / 'missing' / 'pydeferred.ini')
        monkeypatch.setattr(config, '_config_file_path', path)

        with caplog.at_level(logging.WARNING):
            config.set('debug_mode', True)
        assert 'Unable to write in the config file' in caplog.text
        assert config.get('debug_mode') is True
