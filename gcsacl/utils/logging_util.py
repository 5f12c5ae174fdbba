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
"""Logging setup shared by applications that use gcsacl."""

import logging

from gcsacl.utils.constants import DEBUGLEVEL_DUMP_REQUESTS

import httplib2


def ConfigureLogging(debug=0, quiet=False):
  """Configures the root logger the way the debug level asks for.

  Args:
    debug: Debug level (0..3). At 2 and above, DEBUG records are shown; at
           DEBUGLEVEL_DUMP_REQUESTS httplib2 also dumps requests, including
           authentication headers.
    quiet: If True, only warnings and errors are shown.
  """
  httplib2.debuglevel = debug if debug >= DEBUGLEVEL_DUMP_REQUESTS else 0
  if debug >= 2:
    logging.basicConfig(level=logging.DEBUG)
  elif quiet:
    logging.basicConfig(level=logging.WARNING)
  else:
    logging.basicConfig(level=logging.INFO)
    # google.auth uses info logging in places that would better correspond
    # to our debug logging (e.g., when refreshing access tokens).
    logging.getLogger('google.auth').setLevel(logging.WARNING)
