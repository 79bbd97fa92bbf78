# Copyright 2025 Google LLC
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

"""Garbage collection rules for column families.

The rule classes are those of :mod:`google.cloud.bigtable.column_family`;
this module adds shorthand constructors for them.
"""

import datetime

from google.cloud.bigtable.column_family import GarbageCollectionRule  # noqa: F401
from google.cloud.bigtable.column_family import GCRuleIntersection
from google.cloud.bigtable.column_family import GCRuleUnion
from google.cloud.bigtable.column_family import MaxAgeGCRule
from google.cloud.bigtable.column_family import MaxVersionsGCRule
from google.cloud.bigtable.column_family import _gc_rule_from_pb as gc_rule_from_pb  # noqa: F401


def max_versions(max_num_versions):
    """Keep at most ``max_num_versions`` versions of a cell."""
    return MaxVersionsGCRule(max_num_versions)


def max_age(age):
    """Collect cells older than ``age``.

    :type age: :class:`datetime.timedelta` or number
    :param age: The maximum age. Plain numbers are read as seconds.
    """
    if not isinstance(age, datetime.timedelta):
        age = datetime.timedelta(seconds=age)
    return MaxAgeGCRule(age)


def union(*rules):
    """Collect cells matching any of ``rules``."""
    return GCRuleUnion(list(rules))


def intersection(*rules):
    """Collect cells matching all of ``rules``."""
    return GCRuleIntersection(list(rules))
