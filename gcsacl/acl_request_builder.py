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
"""Builds request descriptors for the bucketAccessControls and
objectAccessControls resources of the JSON API.

Builders only validate arguments and assemble the request; they never
perform I/O. GcsJsonAclApi executes the result.
"""

import collections
from urllib.parse import quote

from gcsacl.acl_helper import BuildEntity
from gcsacl.acl_helper import EncodeObjectName
from gcsacl.acl_helper import EntityType
from gcsacl.acl_helper import GetBucketName
from gcsacl.acl_helper import Role
from gcsacl.acl_helper import ValidateEntity
from gcsacl.acl_helper import ValidateEntityType
from gcsacl.acl_helper import ValidateRole
from gcsacl.utils.constants import DEFAULT_JSON_API_BASE

# method: HTTP method string.
# url: Fully qualified URL, without query string.
# params: Dict of query parameters; empty when there are none.
# body: Dict to be sent as JSON, or None.
AclRequest = collections.namedtuple('AclRequest',
                                    ['method', 'url', 'params', 'body'])


def _CanonicalEntity(entity, entity_type):
  ValidateEntityType(entity_type)
  ValidateEntity(entity, entity_type)
  return BuildEntity(entity, entity_type)


def _EntitySegment(canonical_entity):
  # '@' is a legal path character; emails stay readable in the URL.
  return quote(canonical_entity, safe='@')


def _BucketUrl(url_base, bucket):
  return '%s/b/%s' % (url_base.rstrip('/'),
                      quote(GetBucketName(bucket), safe=''))


def _ObjectUrl(url_base, bucket, object_name):
  return '%s/o/%s' % (_BucketUrl(url_base, bucket),
                      EncodeObjectName(object_name))


def _GenerationParams(generation):
  if generation is None:
    return {}
  return {'generation': str(generation)}


def _AccessControlBody(entity, entity_type, role):
  canonical_entity = _CanonicalEntity(entity, entity_type)
  return {'entity': canonical_entity, 'role': ValidateRole(role)}


def BuildGetBucketAclRequest(bucket, entity='', entity_type=EntityType.USER,
                             url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.bucketAccessControls.get request.

  Args:
    bucket: Bucket name or bucket metadata dict.
    entity: The entity holding the permission. Not needed for the allUsers
            and allAuthenticatedUsers entity types.
    entity_type: One of acl_helper.EntityType.ALL.
    url_base: JSON API base URL.

  Returns:
    AclRequest for GET /b/{bucket}/acl/{entity}.

  Raises:
    InvalidArgumentException if any argument is invalid.
  """
  canonical_entity = _CanonicalEntity(entity, entity_type)
  url = '%s/acl/%s' % (_BucketUrl(url_base, bucket),
                       _EntitySegment(canonical_entity))
  return AclRequest('GET', url, {}, None)


def BuildCreateBucketAclRequest(bucket, entity='', entity_type=EntityType.USER,
                                role=Role.READER,
                                url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.bucketAccessControls.insert request.

  Returns:
    AclRequest for POST /b/{bucket}/acl with an {entity, role} body.

  Raises:
    InvalidArgumentException if any argument is invalid.
  """
  body = _AccessControlBody(entity, entity_type, role)
  return AclRequest('POST', '%s/acl' % _BucketUrl(url_base, bucket), {}, body)


def BuildUpdateObjectAclRequest(object_name, bucket, entity='',
                                entity_type=EntityType.USER, role=Role.READER,
                                url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.objectAccessControls.insert request.

  An insert for an entity that already has an entry replaces its role, which
  is how object ACLs are updated.

  Returns:
    AclRequest for POST /b/{bucket}/o/{object}/acl with an {entity, role}
    body.

  Raises:
    InvalidArgumentException if any argument is invalid.
  """
  body = _AccessControlBody(entity, entity_type, role)
  url = '%s/acl' % _ObjectUrl(url_base, bucket, object_name)
  return AclRequest('POST', url, {}, body)


def BuildGetObjectAclRequest(object_name, bucket, entity='',
                             entity_type=EntityType.USER, generation=None,
                             url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.objectAccessControls.get request.

  Args:
    object_name: Name of the object. A leading slash is ignored.
    bucket: Bucket name or bucket metadata dict.
    entity: The entity holding the permission.
    entity_type: One of acl_helper.EntityType.ALL.
    generation: If present, selects a specific revision of the object.
    url_base: JSON API base URL.

  Returns:
    AclRequest for GET /b/{bucket}/o/{object}/acl/{entity}.
  """
  canonical_entity = _CanonicalEntity(entity, entity_type)
  url = '%s/acl/%s' % (_ObjectUrl(url_base, bucket, object_name),
                       _EntitySegment(canonical_entity))
  return AclRequest('GET', url, _GenerationParams(generation), None)


def BuildListBucketAclRequest(bucket, url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.bucketAccessControls.list request."""
  return AclRequest('GET', '%s/acl' % _BucketUrl(url_base, bucket), {}, None)


def BuildDeleteBucketAclRequest(bucket, entity='', entity_type=EntityType.USER,
                                url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.bucketAccessControls.delete request."""
  canonical_entity = _CanonicalEntity(entity, entity_type)
  url = '%s/acl/%s' % (_BucketUrl(url_base, bucket),
                       _EntitySegment(canonical_entity))
  return AclRequest('DELETE', url, {}, None)


def BuildListObjectAclRequest(object_name, bucket, generation=None,
                              url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.objectAccessControls.list request."""
  url = '%s/acl' % _ObjectUrl(url_base, bucket, object_name)
  return AclRequest('GET', url, _GenerationParams(generation), None)


def BuildDeleteObjectAclRequest(object_name, bucket, entity='',
                                entity_type=EntityType.USER, generation=None,
                                url_base=DEFAULT_JSON_API_BASE):
  """Builds a storage.objectAccessControls.delete request."""
  canonical_entity = _CanonicalEntity(entity, entity_type)
  url = '%s/acl/%s' % (_ObjectUrl(url_base, bucket, object_name),
                       _EntitySegment(canonical_entity))
  return AclRequest('DELETE', url, _GenerationParams(generation), None)
