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
"""Client library for Google Cloud Storage access control lists."""

import os

# Directory containing the gcsacl module.
GCSACL_DIR = os.path.abspath(os.path.dirname(__file__))

VERSION = '1.0.0'
__version__ = VERSION
