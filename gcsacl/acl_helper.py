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
"""Contains helpers for validating and canonicalizing ACL arguments."""

from urllib.parse import quote

from gcsacl.exception import InvalidArgumentException


class EntityType(object):
  """Closed set of entity types accepted by the ACL resources."""
  USER = 'user'
  GROUP = 'group'
  DOMAIN = 'domain'
  PROJECT = 'project'
  ALL_USERS = 'allUsers'
  ALL_AUTHENTICATED_USERS = 'allAuthenticatedUsers'

  PUBLIC = (ALL_USERS, ALL_AUTHENTICATED_USERS)
  ALL = (USER, GROUP, DOMAIN, PROJECT) + PUBLIC


class Role(object):
  """Closed set of roles that can be granted to an entity."""
  READER = 'READER'
  OWNER = 'OWNER'

  ALL = (READER, OWNER)


def _ValidateChoice(value, choices, argument_name):
  if value not in choices:
    raise InvalidArgumentException(
        '%r is not a valid %s. Allowed values are %s' %
        (value, argument_name, ', '.join(choices)))
  return value


def ValidateEntityType(entity_type):
  """Returns entity_type if it is one of EntityType.ALL.

  Raises:
    InvalidArgumentException if entity_type is not recognized.
  """
  return _ValidateChoice(entity_type, EntityType.ALL, 'entity_type')


def ValidateRole(role):
  """Returns role if it is one of Role.ALL.

  Raises:
    InvalidArgumentException if role is not recognized.
  """
  return _ValidateChoice(role, Role.ALL, 'role')


def ValidateEntity(entity, entity_type):
  """Ensures entity identifies a grantee of the given type.

  Args:
    entity: The entity identifier, e.g. an email address or domain. May be
            empty for the public entity types.
    entity_type: One of EntityType.ALL.

  Raises:
    InvalidArgumentException if entity is not a string, or is empty for an
    entity type that requires an identifier.
  """
  if not isinstance(entity, str):
    raise InvalidArgumentException(
        'entity must be a string, got %s' % type(entity).__name__)
  if not entity and entity_type not in EntityType.PUBLIC:
    raise InvalidArgumentException('Must supply non-empty entity argument')


def BuildEntity(entity, entity_type):
  """Returns the canonical entity string for an entity descriptor.

  The public entity types are returned verbatim and entity is ignored;
  everything else is rendered as "<entity_type>-<entity>".
  """
  if entity_type in EntityType.PUBLIC:
    return entity_type
  return '%s-%s' % (entity_type, entity)


def ParseEntity(canonical_entity):
  """Splits a canonical entity string into (entity_type, entity).

  Args:
    canonical_entity: An entity as returned by the service, e.g.
                      "project-owners-123456" or "allUsers".

  Returns:
    (entity_type, entity) tuple. entity is '' for the public entity types.

  Raises:
    InvalidArgumentException if the string does not start with a known type.
  """
  if canonical_entity in EntityType.PUBLIC:
    return canonical_entity, ''
  entity_type, sep, entity = canonical_entity.partition('-')
  if (not sep or not entity or entity_type not in EntityType.ALL or
      entity_type in EntityType.PUBLIC):
    raise InvalidArgumentException(
        '%r is not a valid canonical entity' % canonical_entity)
  return entity_type, entity


def GetBucketName(bucket):
  """Returns a bucket name from a name or a bucket metadata resource.

  Args:
    bucket: A bucket name, or a dict holding bucket metadata as returned by
            the JSON API (its 'name' is used).

  Raises:
    InvalidArgumentException if no bucket name can be determined.
  """
  if isinstance(bucket, dict):
    bucket = bucket.get('name')
  if not isinstance(bucket, str) or not bucket:
    raise InvalidArgumentException(
        'A bucket name or bucket metadata with a name is required')
  return bucket


def EncodeObjectName(object_name):
  """Percent-encodes an object name for use as a single URL path segment.

  Leading slashes are dropped, so "/mtcars.csv" and "mtcars.csv" name the
  same object. All reserved characters, including "/", are escaped.

  Raises:
    InvalidArgumentException if object_name is not a non-empty string.
  """
  if not isinstance(object_name, str):
    raise InvalidArgumentException(
        'object_name must be a string, got %s' % type(object_name).__name__)
  stripped = object_name.lstrip('/')
  if not stripped:
    raise InvalidArgumentException('Must supply non-empty object_name')
  return quote(stripped, safe='')
