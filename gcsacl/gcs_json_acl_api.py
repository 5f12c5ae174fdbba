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
"""JSON API access control implementation for Google Cloud Storage."""

import json
import logging

from gcsacl import acl_request_builder
from gcsacl.acl_helper import EntityType
from gcsacl.acl_helper import Role
from gcsacl.exception import AccessDeniedException
from gcsacl.exception import BadRequestException
from gcsacl.exception import InvalidArgumentException
from gcsacl.exception import NotFoundException
from gcsacl.exception import OperationFailedException
from gcsacl.exception import PreconditionException
from gcsacl.exception import ServiceException
from gcsacl.http_wrapper import MakeRequest
from gcsacl.http_wrapper import Request
from gcsacl.utils import config_util
from gcsacl.utils import credentials_util
from gcsacl.utils.constants import JSON_CONTENT_TYPE
from gcsacl.utils.constants import UTF8
from gcsacl.utils.user_agent_helper import GetUserAgent

UPDATE_FAILED_MESSAGE = 'Error setting access'


class GcsJsonAclApi(object):
  """Reads and writes bucket and object ACL entries through the JSON API.

  Each operation validates its arguments, then sends exactly one request.
  Invalid arguments raise InvalidArgumentException before anything is sent;
  non-2xx responses raise a ServiceException subclass. Nothing is retried.
  """

  def __init__(self, logger=None, credentials=None, http=None,
               default_bucket=None, url_base=None, config=None):
    """Sets up the client.

    Args:
      logger: logging.Logger for outputting log messages.
      credentials: WrappedCredentials (or anything with authorize(http))
                   used to authorize http. If neither credentials nor http
                   are given, credentials are loaded from the environment.
      http: httplib2.Http-like object. A new one is created from the
            configuration if not given.
      default_bucket: Bucket used by operations called with bucket=None.
                      Defaults to [GSUtil] default_bucket.
      url_base: JSON API base URL. Defaults to the configured endpoint.
      config: Optional BotoStyleConfig; the process config is used otherwise.
    """
    self.logger = logger or logging.getLogger(__name__)
    if config is None:
      config = config_util.GetConfig()
    if http is None:
      http = config_util.GetNewHttp(config=config)
      if credentials is None:
        credentials = credentials_util.GetCredentials(config=config,
                                                      logger=self.logger)
    if credentials is not None:
      http = credentials.authorize(http)
    self.credentials = credentials
    self.http = http
    self.default_bucket = (default_bucket or
                           config_util.GetDefaultBucket(config))
    self.url_base = url_base or config_util.GetJsonApiBase(config)
    self.user_agent = GetUserAgent()

  def _GetBucket(self, bucket):
    if bucket is None:
      bucket = self.default_bucket
    if bucket is None:
      raise InvalidArgumentException(
          'No bucket supplied and no default bucket is configured')
    return bucket

  def _SendRequest(self, acl_request):
    """Sends an AclRequest and returns the http_wrapper.Response."""
    headers = {
        'accept': JSON_CONTENT_TYPE,
        'user-agent': self.user_agent,
    }
    body = None
    if acl_request.body is not None:
      headers['content-type'] = JSON_CONTENT_TYPE
      body = json.dumps(acl_request.body).encode(UTF8)
    http_request = Request(url=acl_request.url,
                           http_method=acl_request.method,
                           headers=headers, body=body,
                           params=acl_request.params)
    self.logger.debug('Sending %s %s', acl_request.method, http_request.url)
    return MakeRequest(self.http, http_request)

  def _GetMessageFromResponse(self, response):
    if response.content:
      try:
        json_obj = json.loads(response.content)
      except ValueError:
        # If we couldn't decode anything, just leave the message as None.
        return None
      if isinstance(json_obj, dict) and isinstance(json_obj.get('error'),
                                                   dict):
        return json_obj['error'].get('message')

  def _TranslateResponse(self, response):
    """Translates a non-2xx response into its exception equivalent.

    Args:
      response: http_wrapper.Response whose status is not 2xx.

    Returns:
      ServiceException (or a subclass) describing the failure.
    """
    message = self._GetMessageFromResponse(response)
    status = response.status_code
    if status == 400:
      return BadRequestException(message or 'Bad Request', status=status,
                                 body=response.content)
    elif status in (401, 403):
      return AccessDeniedException(message or 'Access denied',
                                   status=status, body=response.content)
    elif status == 404:
      return NotFoundException(message or 'Not Found', status=status,
                               body=response.content)
    elif status == 412:
      return PreconditionException(message or 'Precondition Failed',
                                   status=status, body=response.content)
    return ServiceException(message or 'Service Error', status=status,
                            body=response.content)

  def _Execute(self, acl_request):
    """Sends acl_request and returns its parsed JSON body.

    Raises:
      ServiceException subclass if the response is not 2xx, or
      ServiceException if a 2xx body is not valid JSON.
    """
    response = self._SendRequest(acl_request)
    if not response.ok:
      raise self._TranslateResponse(response)
    if not response.content:
      return None
    try:
      return json.loads(response.content)
    except ValueError:
      raise ServiceException('Could not decode JSON response',
                             status=response.status_code,
                             body=response.content)

  def GetBucketAcl(self, bucket=None, entity='', entity_type=EntityType.USER):
    """Returns the ACL entry for the specified entity on a bucket.

    Args:
      bucket: Bucket name or bucket metadata dict. Defaults to the client's
              default bucket.
      entity: The entity holding the permission. Not needed for entity types
              allUsers and allAuthenticatedUsers.
      entity_type: One of EntityType.ALL.

    Returns:
      The BucketAccessControl resource, as a dict.
    """
    acl_request = acl_request_builder.BuildGetBucketAclRequest(
        self._GetBucket(bucket), entity=entity, entity_type=entity_type,
        url_base=self.url_base)
    return self._Execute(acl_request)

  def CreateBucketAcl(self, bucket=None, entity='',
                      entity_type=EntityType.USER, role=Role.READER):
    """Creates a new access control entry at the bucket level.

    Returns:
      The created BucketAccessControl resource, as a dict.
    """
    acl_request = acl_request_builder.BuildCreateBucketAclRequest(
        self._GetBucket(bucket), entity=entity, entity_type=entity_type,
        role=role, url_base=self.url_base)
    return self._Execute(acl_request)

  def ListBucketAcl(self, bucket=None):
    """Returns the list of BucketAccessControl dicts on a bucket."""
    acl_request = acl_request_builder.BuildListBucketAclRequest(
        self._GetBucket(bucket), url_base=self.url_base)
    result = self._Execute(acl_request) or {}
    return result.get('items', [])

  def DeleteBucketAcl(self, bucket=None, entity='',
                      entity_type=EntityType.USER):
    """Removes the entity's access control entry from a bucket."""
    acl_request = acl_request_builder.BuildDeleteBucketAclRequest(
        self._GetBucket(bucket), entity=entity, entity_type=entity_type,
        url_base=self.url_base)
    self._Execute(acl_request)

  def InsertObjectAcl(self, object_name, bucket=None, entity='',
                      entity_type=EntityType.USER, role=Role.READER):
    """Grants role to an entity on an object.

    Returns:
      The created ObjectAccessControl resource, as a dict.
    """
    acl_request = acl_request_builder.BuildUpdateObjectAclRequest(
        object_name, self._GetBucket(bucket), entity=entity,
        entity_type=entity_type, role=role, url_base=self.url_base)
    return self._Execute(acl_request)

  def UpdateObjectAcl(self, object_name, bucket=None, entity='',
                      entity_type=EntityType.USER, role=Role.READER):
    """Changes access to an object in a bucket.

    An entity is an identifier for the entity_type, for example:
      user: a user id or email, e.g. jane@doe.com
      group: a group id or email, e.g. example@googlegroups.com
      domain: a Google Apps domain, e.g. example.com
      project: team-projectId, e.g. owners-123456

    Args:
      object_name: Object to update. A leading slash is ignored.
      bucket: Bucket name or bucket metadata dict. Defaults to the client's
              default bucket.
      entity: Entity to update or add.
      entity_type: One of EntityType.ALL.
      role: One of Role.ALL.

    Returns:
      True if the service acknowledged the change with a 200.

    Raises:
      InvalidArgumentException: if an argument is invalid.
      OperationFailedException: for any other status.
    """
    acl_request = acl_request_builder.BuildUpdateObjectAclRequest(
        object_name, self._GetBucket(bucket), entity=entity,
        entity_type=entity_type, role=role, url_base=self.url_base)
    response = self._SendRequest(acl_request)
    if response.status_code != 200:
      raise OperationFailedException(
          UPDATE_FAILED_MESSAGE, status=response.status_code,
          body=response.content)
    self.logger.info('Access updated')
    return True

  def GetObjectAcl(self, object_name, bucket=None, entity='',
                   entity_type=EntityType.USER, generation=None):
    """Returns the ACL entry for one entity on an object.

    Args:
      object_name: Name of the object.
      bucket: Bucket name or bucket metadata dict.
      entity: The entity holding the permission. Not needed for entity types
              allUsers and allAuthenticatedUsers.
      entity_type: One of EntityType.ALL.
      generation: If present, selects a specific revision of the object.

    Returns:
      The ObjectAccessControl resource, as a dict.
    """
    acl_request = acl_request_builder.BuildGetObjectAclRequest(
        object_name, self._GetBucket(bucket), entity=entity,
        entity_type=entity_type, generation=generation,
        url_base=self.url_base)
    return self._Execute(acl_request)

  def ListObjectAcl(self, object_name, bucket=None, generation=None):
    acl_request = acl_request_builder.BuildListObjectAclRequest(
        object_name, self._GetBucket(bucket), generation=generation,
        url_base=self.url_base)
    result = self._Execute(acl_request) or {}
    return result.get('items', [])

  def DeleteObjectAcl(self, object_name, bucket=None, entity='',
                      entity_type=EntityType.USER, generation=None):
    acl_request = acl_request_builder.BuildDeleteObjectAclRequest(
        object_name, self._GetBucket(bucket), entity=entity,
        entity_type=entity_type, generation=generation,
        url_base=self.url_base)
    self._Execute(acl_request)
