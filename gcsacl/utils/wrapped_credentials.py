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
"""Classes and functions to let google.auth credentials authorize httplib2."""

import io
import json

from google.auth import aws
from google.auth import credentials
from google.auth import identity_pool
from google.auth.transport import requests
import httplib2

from gcsacl.utils import constants

DEFAULT_SCOPES = [
    constants.Scopes.CLOUD_PLATFORM,
    constants.Scopes.FULL_CONTROL,
]


class WrappedCredentials(object):
  """Wraps a google.auth credential so it can authorize an httplib2.Http.

  authorize(http) patches http.request so every call carries a bearer
  token; the token is refreshed through google.auth whenever it is missing
  or expired.
  """

  def __init__(self, base):
    if not isinstance(base, credentials.Credentials):
      raise TypeError('Invalid Credentials')
    self._base = base
    self._refresh_request = None

  def _GetRefreshRequest(self):
    if self._refresh_request is None:
      self._refresh_request = requests.Request()
    return self._refresh_request

  @property
  def access_token(self):
    return self._base.token

  @access_token.setter
  def access_token(self, value):
    self._base.token = value

  @property
  def token_expiry(self):
    return self._base.expiry

  @token_expiry.setter
  def token_expiry(self, value):
    self._base.expiry = value

  def refresh(self):
    self._base.refresh(self._GetRefreshRequest())

  def apply(self, method, uri, headers):
    """Adds an authorization header, refreshing the token if needed."""
    self._base.before_request(self._GetRefreshRequest(), method, uri,
                              headers)

  def authorize(self, http):
    """Patches http.request to attach credentials; returns http."""
    orig_request_method = http.request

    def new_request(uri, method='GET', body=None, headers=None,
                    redirections=httplib2.DEFAULT_MAX_REDIRECTS,
                    connection_type=None):
      headers = dict(headers or {})
      self.apply(method, uri, headers)
      return orig_request_method(uri, method=method, body=body,
                                 headers=headers, redirections=redirections,
                                 connection_type=connection_type)

    http.request = new_request
    return http

  @classmethod
  def for_external_account(cls, filename):
    creds = _get_external_account_credentials_from_file(filename)
    if creds is None:
      return None
    return cls(creds)


def _get_external_account_credentials_from_info(info):
  try:
    # Check if configuration corresponds to an AWS credentials.
    return aws.Credentials.from_info(info, scopes=DEFAULT_SCOPES)
  except Exception:  # pylint: disable=broad-except
    pass
  try:
    # Check if configuration corresponds to an Identity Pool credentials.
    return identity_pool.Credentials.from_info(info, scopes=DEFAULT_SCOPES)
  except Exception:  # pylint: disable=broad-except
    # The configuration does not correspond to any supported
    # external_account credentials.
    return None


def _get_external_account_credentials_from_file(filename):
  with io.open(filename, 'r', encoding='utf-8') as json_file:
    data = json.load(json_file)
    return _get_external_account_credentials_from_info(data)
