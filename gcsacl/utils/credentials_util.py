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
"""Helper functions for locating credentials."""

import logging

import google.auth
from google.auth import exceptions as google_auth_exceptions
from google.oauth2 import service_account

from gcsacl.exception import ConfigurationException
from gcsacl.utils import config_util
from gcsacl.utils.wrapped_credentials import DEFAULT_SCOPES
from gcsacl.utils.wrapped_credentials import WrappedCredentials


def GetCredentials(config=None, scopes=None, logger=None):
  """Loads credentials in order of precedence.

  1. [Credentials] gs_service_key_file: a service account JSON key.
  2. [Credentials] gs_external_account_file: a workload identity
     federation configuration.
  3. Application default credentials.

  Args:
    config: Optional BotoStyleConfig; the process config is used otherwise.
    scopes: OAuth2 scopes to request. Defaults to DEFAULT_SCOPES.
    logger: logging.Logger for diagnostic messages.

  Returns:
    WrappedCredentials, or None if no credentials are available, in which
    case requests are sent anonymously.

  Raises:
    ConfigurationException if a configured credential file is unusable.
  """
  logger = logger or logging.getLogger(__name__)
  if config is None:
    config = config_util.GetConfig()
  scopes = scopes or DEFAULT_SCOPES

  key_file = config_util.GetServiceKeyFile(config)
  if key_file:
    logger.debug('Using service account key file %s', key_file)
    try:
      base = service_account.Credentials.from_service_account_file(
          key_file, scopes=scopes)
    except (IOError, ValueError) as e:
      raise ConfigurationException(
          'Could not load service account key file %s: %s' % (key_file, e))
    return WrappedCredentials(base)

  external_account_file = config.get('Credentials',
                                     'gs_external_account_file', None)
  if external_account_file:
    logger.debug('Using external account file %s', external_account_file)
    try:
      creds = WrappedCredentials.for_external_account(external_account_file)
    except (IOError, ValueError) as e:
      raise ConfigurationException(
          'Could not load external account file %s: %s' %
          (external_account_file, e))
    if creds is None:
      raise ConfigurationException(
          '%s is not a supported external account configuration' %
          external_account_file)
    return creds

  try:
    base, _ = google.auth.default(scopes=scopes)
  except google_auth_exceptions.DefaultCredentialsError as e:
    logger.debug('No credentials found, sending anonymous requests: %s', e)
    return None
  return WrappedCredentials(base)
