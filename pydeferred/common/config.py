# -*- coding: utf-8 -*-

"""Manages settings and config file.

Settings are loaded from a configuration file. If they don't exists, default
values are provided, so the module can be used without calling ``load()``.
When an option is set, the config file is updated.

Available settings:
    debug_mode (bool): debug logs of the ``pydeferred`` loggers.
    log_levels (dict): fine-grained log levels, in the form
        'module=LEVEL;module2=LEVEL2'.
    log_callback_traceback (bool): if True, errors raised by promise
        callbacks are logged with their traceback.
"""

import configparser
import logging
import os.path
from . import path as pydeferred_path

_logger = logging.getLogger(__name__)


# Default config dict. Values not present in this dict are not valid.
# Each entry contains the type expected, and the default value.
_default_config = {
    'debug_mode': {'type': bool, 'default': False},
    'log_levels': {'type': dict, 'default': {}},
    'log_callback_traceback': {'type': bool, 'default': True}
}

# Actual config parser
_config_parser = configparser.ConfigParser()
_config_parser.add_section('config')

# Path of the file loaded, if any.
_config_file_path = None


def _get_config_file_path():
    if _config_file_path:
        return _config_file_path
    return os.path.join(pydeferred_path.get_config_dir(), 'pydeferred.ini')


def load(config_file_path=None):
    """Find and load the config file.

    Args:
        config_file_path (str, optional): path of the file to use. By
            default, 'pydeferred.ini' in the user config directory.
    """
    global _config_file_path

    if config_file_path:
        _config_file_path = config_file_path
    config_file_path = _get_config_file_path()

    if not _config_parser.read(config_file_path):
        _logger.warning('Unable to load config file: %s' % config_file_path)


def get(key):
    """Find and return a configuration entry

    If the entry is not specified in the config file, a default value is
    returned.

    Args:
        key (string): the entry key.
    Returns:
        The corresponding value found.
    Raises:
        KeyError: if the config entry doesn't exists.
    """
    if key not in _default_config:
        raise KeyError(key)
    try:
        if _default_config[key]['type'] is bool:
            return _config_parser.getboolean('config', key)
        elif _default_config[key]['type'] is dict:
            # Dict entries are in the form 'key=value;key2=value2'
            dict_str = _config_parser.get('config', key)
            result = {}
            for pair in filter(None, dict_str.split(';')):
                try:
                    (k, v) = pair.split('=')
                    result[k.strip()] = v.strip()
                except ValueError:
                    _logger.warning('Unable to parse pair key=value: "%s"'
                                    % pair)
            return result
        else:
            return _config_parser.get('config', key)
    except configparser.NoOptionError:
        return _default_config[key]['default']
    except ValueError:
        _logger.warning('Invalid value for config entry "%s". Default value '
                        'will be used.' % key)
        return _default_config[key]['default']


def set(key, value):
    """Set a configuration entry.

    Args:
        key (string): the entry key.
        value: the new value to set. Dict values are serialized in the form
            'key=value;key2=value2'; others are converted to string.
    Raises:
        KeyError: if the config entry is not valid.
    """
    if key not in _default_config:
        raise KeyError(key)
    if isinstance(value, dict):
        value = ';'.join('%s=%s' % (k, v) for (k, v) in value.items())
    _config_parser.set('config', key, str(value))
    config_file_path = _get_config_file_path()
    try:
        with open(config_file_path, 'w') as config_file:
            _config_parser.write(config_file)
        _logger.debug('Config file modified.')
    except IOError:
        _logger.warning('Unable to write in the config file', exc_info=True)
