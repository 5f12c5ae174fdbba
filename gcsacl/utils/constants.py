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
"""Shared, hard-coded constants.

A constant should not be placed in this file if:
- it requires complicated or conditional logic to initialize.
- it requires importing any modules outside of the Python standard library.
- it is only used in one file (in which case it should be defined within that
  module).
"""

DEFAULT_GCS_JSON_API_HOST = 'storage.googleapis.com'
DEFAULT_GCS_JSON_API_VERSION = 'v1'
DEFAULT_JSON_API_BASE = 'https://%s/storage/%s' % (
    DEFAULT_GCS_JSON_API_HOST, DEFAULT_GCS_JSON_API_VERSION)

# By default, the timeout for SSL read errors is infinite. This could
# cause requests to hang on network disconnect, so pick a more reasonable
# timeout.
SSL_TIMEOUT_SEC = 60

UTF8 = 'utf-8'
JSON_CONTENT_TYPE = 'application/json'

DEBUGLEVEL_DUMP_REQUESTS = 3


class Scopes(object):
  """Enum class for auth scopes, as unicode."""
  CLOUD_PLATFORM = 'https://www.googleapis.com/auth/cloud-platform'
  CLOUD_PLATFORM_READ_ONLY = (
      'https://www.googleapis.com/auth/cloud-platform.read-only')
  FULL_CONTROL = 'https://www.googleapis.com/auth/devstorage.full_control'
  READ_ONLY = 'https://www.googleapis.com/auth/devstorage.read_only'
  READ_WRITE = 'https://www.googleapis.com/auth/devstorage.read_write'
