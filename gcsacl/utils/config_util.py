# -*- coding: utf-8 -*-
# Copyright 2026 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared utility methods that read the boto-style configuration file.

Configuration is looked up the same way boto does it: the file(s) named by
$BOTO_CONFIG, else those in $BOTO_PATH, else /etc/boto.cfg and ~/.boto.

This module also imports httplib2, since the configuration decides how new
Http instances are set up.
"""

import configparser
import os

from gcsacl.exception import ConfigurationException
from gcsacl.utils.constants import DEFAULT_GCS_JSON_API_HOST
from gcsacl.utils.constants import DEFAULT_GCS_JSON_API_VERSION
from gcsacl.utils.constants import SSL_TIMEOUT_SEC

import httplib2
import socks

DEFAULT_CONFIG_LOCATIONS = ['/etc/boto.cfg', os.path.expanduser('~/.boto')]

_TRUE_VALUES = ('true', 'yes', 'on', '1')
_FALSE_VALUES = ('false', 'no', 'off', '0')

_config = None


class BotoStyleConfig(configparser.RawConfigParser):
  """RawConfigParser whose getters accept a default, as boto's Config does."""

  def get(self, section, option, default=None):
    if not self.has_option(section, option):
      return default
    return configparser.RawConfigParser.get(self, section, option)

  def getint(self, section, option, default=0):
    value = self.get(section, option, None)
    if value is None:
      return default
    try:
      return int(value)
    except ValueError:
      raise ConfigurationException(
          'Invalid integer for [%s] %s: %r' % (section, option, value))

  def getbool(self, section, option, default=False):
    value = self.get(section, option, None)
    if value is None:
      return default
    if value.lower() in _TRUE_VALUES:
      return True
    if value.lower() in _FALSE_VALUES:
      return False
    raise ConfigurationException(
        'Invalid boolean for [%s] %s: %r' % (section, option, value))


def GetConfigFilePaths():
  """Returns the list of candidate config file paths, in load order."""
  if 'BOTO_CONFIG' in os.environ:
    return [os.environ['BOTO_CONFIG']]
  if 'BOTO_PATH' in os.environ:
    return [path for path in os.environ['BOTO_PATH'].split(os.pathsep)
            if path]
  return list(DEFAULT_CONFIG_LOCATIONS)


def LoadConfig(paths=None):
  """Reads the given (or discovered) config files into a BotoStyleConfig.

  Missing files are skipped; later files override earlier ones.

  Raises:
    ConfigurationException if a file exists but cannot be parsed.
  """
  config = BotoStyleConfig()
  if paths is None:
    paths = GetConfigFilePaths()
  try:
    config.read(paths)
  except configparser.Error as e:
    raise ConfigurationException('Could not parse config file: %s' % e)
  return config


def GetConfig():
  """Returns the process configuration, loading it on first use."""
  global _config
  if _config is None:
    _config = LoadConfig()
  return _config


def SetConfig(config):
  """Replaces the process configuration; None forces a reload on next use."""
  global _config
  _config = config


def GetJsonApiBase(config=None):
  """Returns the JSON API base URL, e.g. https://host/storage/v1."""
  if config is None:
    config = GetConfig()
  host = config.get('Credentials', 'gs_json_host', DEFAULT_GCS_JSON_API_HOST)
  port = config.get('Credentials', 'gs_json_port', None)
  host_port = ':%s' % port if port else ''
  version = config.get('GSUtil', 'json_api_version',
                       DEFAULT_GCS_JSON_API_VERSION)
  return 'https://%s%s/storage/%s' % (host, host_port, version)


def GetDefaultBucket(config=None):
  if config is None:
    config = GetConfig()
  return config.get('GSUtil', 'default_bucket', None) or None


def GetServiceKeyFile(config=None):
  if config is None:
    config = GetConfig()
  return config.get('Credentials', 'gs_service_key_file', None)


def GetCertsFile(config=None):
  """Returns the configured CA certificates file, or None for the default."""
  if config is None:
    config = GetConfig()
  certs_file = config.get('Boto', 'ca_certificates_file', None)
  # The 'system' keyword indicates to use the system installed certs.
  if certs_file == 'system':
    return None
  return certs_file


def GetNewHttp(http_class=httplib2.Http, config=None, **kwargs):
  """Creates and returns a new httplib2.Http instance.

  Args:
    http_class: Optional custom Http class to use.
    config: Optional BotoStyleConfig; the process config is used otherwise.
    **kwargs: Arguments to pass to http_class constructor.

  Returns:
    An initialized httplib2.Http instance.
  """
  if config is None:
    config = GetConfig()
  proxy_host = config.get('Boto', 'proxy', None)
  if proxy_host:
    kwargs['proxy_info'] = httplib2.ProxyInfo(
        proxy_type=socks.PROXY_TYPE_HTTP,
        proxy_host=proxy_host,
        proxy_port=config.getint('Boto', 'proxy_port', 0),
        proxy_user=config.get('Boto', 'proxy_user', None),
        proxy_pass=config.get('Boto', 'proxy_pass', None),
        proxy_rdns=config.getbool('Boto', 'proxy_rdns', True))

  certs_file = GetCertsFile(config)
  if certs_file:
    kwargs['ca_certs'] = certs_file
  # Use a non-infinite SSL timeout to avoid hangs during network flakiness.
  kwargs['timeout'] = config.getint('Boto', 'http_socket_timeout',
                                    SSL_TIMEOUT_SEC)
  http = http_class(**kwargs)
  http.disable_ssl_certificate_validation = not config.getbool(
      'Boto', 'https_validate_certificates', True)
  return http
