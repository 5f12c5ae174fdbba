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
"""Helper utilities shared by the gcsacl tests."""

import collections
import json

import httplib2

# An http.request() call as seen by MockHttp.
RecordedRequest = collections.namedtuple(
    'RecordedRequest', ['uri', 'method', 'body', 'headers'])


class MockHttp(object):
  """Stands in for httplib2.Http, replaying canned responses in order.

  Every call to request() is recorded in self.requests so tests can assert
  on exactly what would have been sent.
  """

  def __init__(self, responses=None):
    self.responses = list(responses or [])
    self.requests = []
    self.connections = {}

  def AddResponse(self, status=200, content=None):
    """Queues a response; dict/list content is serialized as JSON."""
    if isinstance(content, (dict, list)):
      content = json.dumps(content)
    if isinstance(content, str):
      content = content.encode('utf-8')
    info = httplib2.Response({'status': str(status),
                              'content-type': 'application/json'})
    self.responses.append((info, content or b''))

  def request(self, uri, method='GET', body=None, headers=None,
              redirections=httplib2.DEFAULT_MAX_REDIRECTS,
              connection_type=None):
    self.requests.append(RecordedRequest(uri, method, body, headers or {}))
    if not self.responses:
      raise AssertionError('Unexpected request: %s %s' % (method, uri))
    return self.responses.pop(0)

  @property
  def last_request(self):
    return self.requests[-1]


def ErrorContent(message, code=403):
  """Returns a JSON API error body carrying message."""
  return {'error': {'code': code, 'message': message,
                    'errors': [{'message': message}]}}
