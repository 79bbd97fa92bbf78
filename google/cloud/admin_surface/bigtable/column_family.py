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

"""User friendly containers for the column families of a table."""

from collections import OrderedDict
from collections.abc import Mapping

from google.cloud.bigtable.column_family import _gc_rule_from_pb
from google.cloud.bigtable_admin_v2.types import bigtable_table_admin
from google.cloud.bigtable_admin_v2.types import table as table_pb2

from google.cloud.admin_surface.exceptions import FrozenColumnFamilyMapError


class ColumnFamily(object):
    """A column family descriptor: a name, its garbage collection rule and
    its value type.

    :type name: str
    :param name: The ID of the column family. Must be of the form
                 ``[_a-zA-Z0-9][-_.a-zA-Z0-9]*``.

    :type gc_rule: :class:`~google.cloud.bigtable.column_family.GarbageCollectionRule`
    :param gc_rule: (Optional) The garbage collection settings for this
                    column family.

    :type value_type: :class:`~google.cloud.bigtable_admin_v2.types.Type`
    :param value_type: (Optional) The type of the cells of an aggregate
                       column family. Unset for plain families.
    """

    def __init__(self, name, gc_rule=None, value_type=None):
        self.name = name
        self.gc_rule = gc_rule
        self.value_type = value_type

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (
            other.name == self.name
            and other.gc_rule == self.gc_rule
            and other.value_type == self.value_type
        )

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "ColumnFamily({!r}, gc_rule={!r}, value_type={!r})".format(
            self.name, self.gc_rule, self.value_type
        )

    def to_pb(self):
        """Converts the column family to a protobuf.

        :rtype: :class:`~google.cloud.bigtable_admin_v2.types.ColumnFamily`
        :returns: The converted current object.
        """
        column_family_kwargs = {}
        if self.gc_rule is not None:
            column_family_kwargs["gc_rule"] = self.gc_rule.to_pb()
        if self.value_type is not None:
            column_family_kwargs["value_type"] = self.value_type
        return table_pb2.ColumnFamily(**column_family_kwargs)

    @classmethod
    def from_pb(cls, name, column_family_pb):
        value_type = None
        if "value_type" in column_family_pb:
            value_type = column_family_pb.value_type
        return cls(
            name,
            gc_rule=_gc_rule_from_pb(column_family_pb.gc_rule),
            value_type=value_type,
        )


class ColumnFamilyMap(Mapping):
    """Ordered mapping of column family name to :class:`ColumnFamily`.

    A map can be frozen with :meth:`freeze`; a frozen map raises
    :class:`~google.cloud.admin_surface.exceptions.FrozenColumnFamilyMapError`
    from every mutator. Use :meth:`copy` to get a mutable duplicate.

    For example::

        cfm = ColumnFamilyMap()
        cfm.add("cf1", gc_rule=gc_rule.max_versions(1))
        cfm.add("cf2", gc_rule=gc_rule.max_age(600))
    """

    def __init__(self):
        self._families = OrderedDict()
        self._frozen = False

    def __getitem__(self, name):
        return self._families[name]

    def __iter__(self):
        return iter(self._families)

    def __len__(self):
        return len(self._families)

    def __repr__(self):
        return "ColumnFamilyMap({!r})".format(list(self._families.values()))

    @property
    def frozen(self):
        return self._frozen

    def freeze(self):
        """Make this map read-only. Returns the map itself."""
        self._frozen = True
        return self

    def copy(self):
        """Return an unfrozen duplicate of this map."""
        duplicate = self.__class__()
        for name, column_family in self._families.items():
            duplicate._families[name] = ColumnFamily(
                name, column_family.gc_rule, column_family.value_type
            )
        return duplicate

    def _ensure_mutable(self):
        if self._frozen:
            raise FrozenColumnFamilyMapError("can't modify frozen ColumnFamilyMap")

    def add(self, name, gc_rule=None, value_type=None):
        """Add a column family.

        Pass ``value_type`` to create an aggregate column family.

        :raises: :class:`KeyError` if ``name`` already exists.
        """
        self._ensure_mutable()
        if name in self._families:
            raise KeyError("column family {!r} already exists".format(name))
        self._families[name] = ColumnFamily(
            name, gc_rule=gc_rule, value_type=value_type
        )
        return self._families[name]

    def update(self, name, gc_rule=None):
        """Replace the garbage collection rule of an existing column family.

        The value type of the family is kept.

        :raises: :class:`KeyError` if ``name`` does not exist.
        """
        self._ensure_mutable()
        if name not in self._families:
            raise KeyError("column family {!r} does not exist".format(name))
        value_type = self._families[name].value_type
        self._families[name] = ColumnFamily(
            name, gc_rule=gc_rule, value_type=value_type
        )
        return self._families[name]

    def delete(self, name):
        """Remove a column family.

        :raises: :class:`KeyError` if ``name`` does not exist.
        """
        self._ensure_mutable()
        if name not in self._families:
            raise KeyError("column family {!r} does not exist".format(name))
        return self._families.pop(name)

    def modifications(self, prior=None):
        """Compute the changes turning ``prior`` into this map.

        Creates come first (in this map's order), then updates of families
        whose GC rule or value type changed, then drops (in ``prior``'s order).

        :type prior: :class:`ColumnFamilyMap` or mapping of name to
                     :class:`~google.cloud.bigtable_admin_v2.types.ColumnFamily`
        :param prior: (Optional) The map to compare against. Empty if unset.

        :rtype: list
        :returns: A list of
                  :class:`~google.cloud.bigtable_admin_v2.types.ModifyColumnFamiliesRequest.Modification`.
        """
        if prior is None:
            prior = ColumnFamilyMap()
        elif not isinstance(prior, ColumnFamilyMap):
            prior = ColumnFamilyMap.from_pb(prior)

        Modification = bigtable_table_admin.ModifyColumnFamiliesRequest.Modification
        created = []
        updated = []
        for name, column_family in self._families.items():
            if name not in prior:
                created.append(Modification(id=name, create=column_family.to_pb()))
            elif prior[name] != column_family:
                updated.append(Modification(id=name, update=column_family.to_pb()))
        dropped = [
            Modification(id=name, drop=True) for name in prior if name not in self
        ]
        return created + updated + dropped

    def to_pb(self):
        """Convert to a dict of name to ``ColumnFamily`` message."""
        return {
            name: column_family.to_pb()
            for name, column_family in self._families.items()
        }

    @classmethod
    def from_pb(cls, column_families_pb):
        """Build an unfrozen map from a mapping of name to ``ColumnFamily`` message."""
        column_family_map = cls()
        for name, column_family_pb in column_families_pb.items():
            column_family_map._families[name] = ColumnFamily.from_pb(
                name, column_family_pb
            )
        return column_family_map
