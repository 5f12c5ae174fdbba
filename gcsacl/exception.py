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
"""Exceptions raised by the gcsacl library."""


class GcsAclException(Exception):
  """Base exception for all gcsacl errors."""

  def __init__(self, reason):
    Exception.__init__(self, reason)
    self.reason = reason

  def __repr__(self):
    return str(self)

  def __str__(self):
    return '%s: %s' % (self.__class__.__name__, self.reason)


class InvalidArgumentException(GcsAclException):
  """Raised when an argument is invalid, before any request is sent."""


class ConfigurationException(GcsAclException):
  """Raised when configuration or credential files cannot be used."""


class RequestError(GcsAclException):
  """Raised when the transport returns no response at all."""


class ServiceException(GcsAclException):
  """Raised when the service answers a request with a non-2xx status."""

  def __init__(self, reason, status=None, body=None):
    super(ServiceException, self).__init__(reason)
    self.status = status
    self.body = body

  def __str__(self):
    message = '%s: %s' % (self.__class__.__name__, self.reason)
    if self.status:
      message += ' (status %s)' % self.status
    return message


class BadRequestException(ServiceException):
  """Exception raised for malformed requests."""


class AccessDeniedException(ServiceException):
  """Exception raised when authentication or authorization fails."""


class NotFoundException(ServiceException):
  """Exception raised when a bucket, object or ACL entry does not exist."""


class PreconditionException(ServiceException):
  """Exception raised when a precondition (e.g. generation) is not met."""


class OperationFailedException(ServiceException):
  """Exception raised when an ACL update is not acknowledged with a 200."""
