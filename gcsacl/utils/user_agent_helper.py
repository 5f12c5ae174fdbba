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
"""Contains helper for building the User-Agent header."""

import platform
import sys

import gcsacl


def GetUserAgent(suffix=None):
  """Returns the User-Agent string sent with every request.

  Args:
    suffix: Optional string appended to identify the calling application.

  Returns:
    str, e.g. "gcsacl/1.0.0 (linux) Python/3.12.1".
  """
  user_agent = 'gcsacl/%s' % gcsacl.VERSION
  user_agent += ' (%s)' % sys.platform
  user_agent += ' Python/%s' % platform.python_version()
  if suffix:
    user_agent += ' %s' % suffix
  return user_agent
