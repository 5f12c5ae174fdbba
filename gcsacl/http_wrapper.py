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
"""HTTP wrapper for the ACL client.

This library wraps the underlying http library we use, which is
currently httplib2. Requests are sent exactly once; retrying is left to
callers.
"""

import collections
from urllib.parse import urlencode
from urllib.parse import urlsplit

from gcsacl.exception import RequestError

__all__ = [
    'MakeRequest',
    'Request',
    'Response',
]


class Request(object):
  """Class encapsulating the data for an HTTP request."""

  def __init__(self, url='', http_method='GET', headers=None, body=None,
               params=None):
    self.url = url
    if params:
      self.url = '%s?%s' % (url, urlencode(sorted(params.items())))
    self.http_method = http_method
    self.headers = headers or {}
    self.__body = None
    self.body = body

  @property
  def body(self):
    return self.__body

  @body.setter
  def body(self, value):
    self.__body = value
    if value is not None:
      self.headers['content-length'] = str(len(self.__body))
    else:
      self.headers.pop('content-length', None)


# Note: currently the order of fields here is important, since we want
# to be able to pass in the result from httplib2.request.
class Response(collections.namedtuple(
    'HttpResponse', ['info', 'content', 'request_url'])):
  """Class encapsulating data for an HTTP response."""
  __slots__ = ()

  def __len__(self):
    return self.length

  @property
  def length(self):
    if 'content-length' in self.info:
      return int(self.info.get('content-length'))
    return len(self.content)

  @property
  def status_code(self):
    return int(self.info['status'])

  @property
  def ok(self):
    return 200 <= self.status_code < 300


def MakeRequest(http, http_request, redirections=5):
  """Send http_request via the given http.

  This wrapper exists to handle translation between the plain httplib2
  request/response types and the Request and Response types above. Status
  codes are not interpreted here.

  Args:
    http: An httplib2.Http instance, or an object with the same request()
          signature, e.g. one authorized by WrappedCredentials.
    http_request: A Request to send.
    redirections: (int, default 5) Number of redirects to follow.

  Returns:
    Response object.

  Raises:
    RequestError if no response could be parsed.
  """
  connection_type = None
  if getattr(http, 'connections', None):
    url_scheme = urlsplit(http_request.url).scheme
    if url_scheme and url_scheme in http.connections:
      connection_type = http.connections[url_scheme]

  info, content = http.request(
      str(http_request.url), method=str(http_request.http_method),
      body=http_request.body, headers=http_request.headers,
      redirections=redirections, connection_type=connection_type)

  if info is None:
    raise RequestError(
        'Request to url %s did not return a response.' % http_request.url)

  return Response(info, content, http_request.url)
