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
"""Base test case class for unit tests."""

import os.path
import shutil
import tempfile
import unittest


class GcsAclTestCase(unittest.TestCase):
  """Base test case class for unit tests."""

  def setUp(self):
    self.tempdirs = []

  def tearDown(self):
    while self.tempdirs:
      tmpdir = self.tempdirs.pop()
      shutil.rmtree(tmpdir, ignore_errors=True)

  def CreateTempDir(self):
    """Creates a temporary directory, deleted after the test."""
    tmpdir = tempfile.mkdtemp(prefix='gcsacl-test-%s-' % self._testMethodName)
    self.tempdirs.append(tmpdir)
    return tmpdir

  def CreateTempFile(self, tmpdir=None, contents=None, file_name=None):
    """Creates a temporary file on disk.

    Args:
      tmpdir: The temporary directory to place the file in. If not specified, a
              new temporary directory is created.
      contents: The contents to write to the file.
      file_name: The name to use for the file.

    Returns:
      The path to the new temporary file.
    """
    tmpdir = tmpdir or self.CreateTempDir()
    file_name = file_name or 'test-file'
    fpath = os.path.join(tmpdir, file_name)
    with open(fpath, 'w') as f:
      f.write(contents or '')
    return fpath
