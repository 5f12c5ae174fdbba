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
"""Unit tests for the boto-style configuration helpers."""

import os
from unittest import mock

import socks

from gcsacl.exception import ConfigurationException
import gcsacl.tests.testcase as testcase
from gcsacl.utils import config_util

CONFIG_CONTENTS = """
[Credentials]
gs_json_host = storage.example.com
gs_service_key_file = /path/to/key.json

[GSUtil]
default_bucket = mybucket
json_api_version = v2

[Boto]
https_validate_certificates = False
http_socket_timeout = 10
ca_certificates_file = system
"""


class TestConfigUtil(testcase.GcsAclTestCase):
  """Unit tests for config_util."""

  def setUp(self):
    super(TestConfigUtil, self).setUp()
    self.config_path = self.CreateTempFile(contents=CONFIG_CONTENTS,
                                           file_name='boto')
    self.config = config_util.LoadConfig([self.config_path])

  def tearDown(self):
    config_util.SetConfig(None)
    super(TestConfigUtil, self).tearDown()

  def testGetWithDefaults(self):
    self.assertEqual('mybucket',
                     self.config.get('GSUtil', 'default_bucket', None))
    self.assertEqual('fallback',
                     self.config.get('GSUtil', 'missing', 'fallback'))
    self.assertIsNone(self.config.get('NoSection', 'missing'))
    self.assertEqual(10, self.config.getint('Boto', 'http_socket_timeout', 60))
    self.assertEqual(60, self.config.getint('Boto', 'missing', 60))
    self.assertFalse(self.config.getbool('Boto',
                                         'https_validate_certificates', True))
    self.assertTrue(self.config.getbool('Boto', 'missing', True))

  def testInvalidValues(self):
    self.config.set('Boto', 'http_socket_timeout', 'soon')
    with self.assertRaises(ConfigurationException):
      self.config.getint('Boto', 'http_socket_timeout')
    self.config.set('Boto', 'https_validate_certificates', 'maybe')
    with self.assertRaises(ConfigurationException):
      self.config.getbool('Boto', 'https_validate_certificates')

  def testConfiguredValues(self):
    self.assertEqual('https://storage.example.com/storage/v2',
                     config_util.GetJsonApiBase(self.config))
    self.assertEqual('mybucket', config_util.GetDefaultBucket(self.config))
    self.assertEqual('/path/to/key.json',
                     config_util.GetServiceKeyFile(self.config))
    self.assertIsNone(config_util.GetCertsFile(self.config))

  def testEmptyConfigDefaults(self):
    config = config_util.BotoStyleConfig()
    self.assertEqual('https://storage.googleapis.com/storage/v1',
                     config_util.GetJsonApiBase(config))
    self.assertIsNone(config_util.GetDefaultBucket(config))
    self.assertIsNone(config_util.GetServiceKeyFile(config))

  def testMissingFilesAreSkipped(self):
    missing = os.path.join(self.CreateTempDir(), 'nothing-here')
    config = config_util.LoadConfig([missing, self.config_path])
    self.assertEqual('mybucket', config_util.GetDefaultBucket(config))

  def testMalformedFile(self):
    bad_path = self.CreateTempFile(contents='no section header\n')
    with self.assertRaises(ConfigurationException):
      config_util.LoadConfig([bad_path])

  def testConfigFilePathsFromEnvironment(self):
    with mock.patch.dict(os.environ, {'BOTO_CONFIG': self.config_path}):
      self.assertEqual([self.config_path], config_util.GetConfigFilePaths())
    env = {'BOTO_PATH': os.pathsep.join(['/a.cfg', '/b.cfg'])}
    with mock.patch.dict(os.environ, env):
      os.environ.pop('BOTO_CONFIG', None)
      self.assertEqual(['/a.cfg', '/b.cfg'], config_util.GetConfigFilePaths())

  def testGetConfigIsCached(self):
    with mock.patch.dict(os.environ, {'BOTO_CONFIG': self.config_path}):
      config_util.SetConfig(None)
      first = config_util.GetConfig()
      self.assertIs(first, config_util.GetConfig())
      self.assertEqual('mybucket', config_util.GetDefaultBucket())

  def testGetNewHttp(self):
    http_class = mock.Mock()
    http = config_util.GetNewHttp(http_class=http_class, config=self.config)
    http_class.assert_called_once_with(timeout=10)
    self.assertTrue(http.disable_ssl_certificate_validation)

  def testGetNewHttpWithProxyAndCerts(self):
    self.config.set('Boto', 'proxy', 'proxy.example.com')
    self.config.set('Boto', 'proxy_port', '3128')
    self.config.set('Boto', 'ca_certificates_file', '/etc/certs.pem')
    self.config.set('Boto', 'https_validate_certificates', 'True')
    http_class = mock.Mock()
    http = config_util.GetNewHttp(http_class=http_class, config=self.config)
    kwargs = http_class.call_args[1]
    self.assertEqual('/etc/certs.pem', kwargs['ca_certs'])
    self.assertEqual('proxy.example.com', kwargs['proxy_info'].proxy_host)
    self.assertEqual(3128, kwargs['proxy_info'].proxy_port)
    self.assertEqual(socks.PROXY_TYPE_HTTP, kwargs['proxy_info'].proxy_type)
    self.assertTrue(kwargs['proxy_info'].isgood())
    self.assertFalse(http.disable_ssl_certificate_validation)
