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

import datetime

import pytest

from google.protobuf import duration_pb2
from google.cloud.bigtable_admin_v2.types import table as table_pb2

from google.cloud.admin_surface.bigtable import gc_rule


def test_max_versions_to_pb():
    rule = gc_rule.MaxVersionsGCRule(3)
    assert rule.to_pb() == table_pb2.GcRule(max_num_versions=3)


def test_max_age_to_pb_from_seconds():
    rule = gc_rule.max_age(600)

    assert rule.max_age == datetime.timedelta(seconds=600)
    assert rule.to_pb() == table_pb2.GcRule(
        max_age=duration_pb2.Duration(seconds=600)
    )


def test_max_age_to_pb_from_timedelta():
    rule = gc_rule.MaxAgeGCRule(datetime.timedelta(seconds=1, microseconds=500))
    assert rule.to_pb() == table_pb2.GcRule(
        max_age=duration_pb2.Duration(seconds=1, nanos=500000)
    )


def test_union_to_pb():
    rule = gc_rule.union(gc_rule.max_versions(1), gc_rule.max_age(10))

    expected = table_pb2.GcRule(
        union=table_pb2.GcRule.Union(
            rules=[
                table_pb2.GcRule(max_num_versions=1),
                table_pb2.GcRule(max_age=duration_pb2.Duration(seconds=10)),
            ]
        )
    )
    assert isinstance(rule, gc_rule.GCRuleUnion)
    assert rule.to_pb() == expected


def test_intersection_to_pb():
    rule = gc_rule.intersection(gc_rule.max_versions(1), gc_rule.max_versions(2))

    expected = table_pb2.GcRule(
        intersection=table_pb2.GcRule.Intersection(
            rules=[
                table_pb2.GcRule(max_num_versions=1),
                table_pb2.GcRule(max_num_versions=2),
            ]
        )
    )
    assert isinstance(rule, gc_rule.GCRuleIntersection)
    assert rule.to_pb() == expected


def test_rules_compare_by_value():
    assert gc_rule.max_versions(2) == gc_rule.max_versions(2)
    assert gc_rule.max_versions(2) != gc_rule.max_versions(3)
    assert gc_rule.max_versions(2) != gc_rule.max_age(2)
    assert gc_rule.union(gc_rule.max_age(5)) == gc_rule.union(gc_rule.max_age(5))
    assert gc_rule.max_versions(2) != object()


def test_rules_are_library_classes():
    from google.cloud.bigtable import column_family

    assert gc_rule.MaxVersionsGCRule is column_family.MaxVersionsGCRule
    assert gc_rule.MaxAgeGCRule is column_family.MaxAgeGCRule
    assert gc_rule.GCRuleUnion is column_family.GCRuleUnion
    assert gc_rule.GCRuleIntersection is column_family.GCRuleIntersection
    assert isinstance(gc_rule.max_age(1), column_family.GarbageCollectionRule)


def test_gc_rule_from_pb_empty():
    assert gc_rule.gc_rule_from_pb(table_pb2.GcRule()) is None


@pytest.mark.parametrize(
    "rule",
    [
        gc_rule.max_versions(4),
        gc_rule.max_age(3600),
        gc_rule.union(gc_rule.max_versions(1), gc_rule.max_age(60)),
        gc_rule.intersection(
            gc_rule.max_versions(1),
            gc_rule.union(gc_rule.max_versions(2), gc_rule.max_age(1)),
        ),
    ],
)
def test_gc_rule_from_pb(rule):
    result = gc_rule.gc_rule_from_pb(rule.to_pb())

    assert type(result) is type(rule)
    assert result == rule
