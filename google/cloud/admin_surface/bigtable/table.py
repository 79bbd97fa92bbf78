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

"""User-friendly handle for a Google Cloud Bigtable table resource."""

import logging
import re
import time

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field

from google.api_core import exceptions as core_exceptions
from google.cloud.bigtable_admin_v2.types import table as table_pb2

from google.cloud.admin_surface.bigtable.cluster_state import ClusterState
from google.cloud.admin_surface.bigtable.column_family import ColumnFamilyMap
from google.cloud.admin_surface.bigtable.enums import Granularity
from google.cloud.admin_surface.bigtable.enums import View
from google.cloud.admin_surface.exceptions import ServiceNotBoundError


_LOGGER = logging.getLogger(__name__)

_TABLE_NAME_RE = re.compile(
    r"^projects/(?P<project>[^/]+)/"
    r"instances/(?P<instance_id>[^/]+)/"
    r"tables/(?P<table_id>[^/]+)$"
)

DEFAULT_REPLICATION_TIMEOUT = 600
DEFAULT_CHECK_INTERVAL = 5


@dataclass
class TableSnapshot:
    """Locally cached subset of a table's metadata."""

    granularity: int = Granularity.TIMESTAMP_GRANULARITY_UNSPECIFIED
    column_families: dict = field(default_factory=dict)
    cluster_states: dict = field(default_factory=dict)

    @classmethod
    def from_pb(cls, table_pb):
        return cls(
            granularity=table_pb.granularity,
            column_families=dict(table_pb.column_families),
            cluster_states=dict(table_pb.cluster_states),
        )


def _set_granularity(snapshot, table_pb):
    snapshot.granularity = table_pb.granularity


def _set_column_families(snapshot, table_pb):
    snapshot.column_families = dict(table_pb.column_families)


def _set_cluster_states(snapshot, table_pb):
    snapshot.cluster_states = dict(table_pb.cluster_states)


# Snapshot fields populated by a fetch with each view.
_SETTERS_BY_VIEW = {
    View.NAME_ONLY: (),
    View.SCHEMA_VIEW: (_set_granularity, _set_column_families),
    View.REPLICATION_VIEW: (_set_cluster_states,),
    View.FULL: (_set_granularity, _set_column_families, _set_cluster_states),
}


def _setters_for(view):
    try:
        return _SETTERS_BY_VIEW[View(view)]
    except (KeyError, ValueError):
        raise ValueError("Unsupported table view: {!r}".format(view))


class Table(object):
    """Representation of a Google Cloud Bigtable table.

    A table handle keeps a partial snapshot of the remote table, scoped by
    the *views* fetched so far. Accessors load the view they need on first
    use and afterwards answer from the snapshot; :meth:`reload` discards it.

    .. note::

        A handle is not thread-safe. Concurrent calls on one handle race on
        the snapshot; callers sharing a handle between threads must
        synchronize access themselves.

    Handles are usually obtained from
    :meth:`~google.cloud.admin_surface.bigtable.client.Client.table`,
    :meth:`~google.cloud.admin_surface.bigtable.client.Client.tables` or
    :meth:`create` rather than constructed directly.

    :type table_pb: :class:`~google.cloud.bigtable_admin_v2.types.Table`
    :param table_pb: The table message the handle starts from.

    :type service: :class:`~google.cloud.admin_surface.bigtable.service.Service`
    :param service: The service used for remote calls.

    :type view: int
    :param view: (Optional) The view ``table_pb`` was fetched with. Defaults
                 to :attr:`View.SCHEMA_VIEW`.
    """

    def __init__(self, table_pb, service, view=None):
        self._path = table_pb.name
        self._service = service
        self._view = View(view) if view is not None else View.SCHEMA_VIEW
        self._snapshot = TableSnapshot.from_pb(table_pb)
        self._loaded_views = {self._view}

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return other.path == self.path

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "<Table {}>".format(self._path)

    @property
    def service(self):
        return self._service

    @property
    def project_id(self):
        """The unique identifier for the project.

        :rtype: str
        """
        return self._path.split("/")[1]

    @property
    def instance_id(self):
        """The unique identifier for the instance.

        :rtype: str
        """
        return self._path.split("/")[3]

    @property
    def table_id(self):
        """The unique identifier for the table.

        :rtype: str
        """
        return self._path.split("/")[5]

    name = table_id

    @property
    def path(self):
        """The full path for the table resource.

        Values are of the form
        ``projects/<project_id>/instances/<instance_id>/tables/<table_id>``.

        :rtype: str
        """
        return self._path

    @property
    def view(self):
        return self._view

    @property
    def loaded_views(self):
        """Views fetched into the snapshot so far.

        :rtype: frozenset
        """
        return frozenset(self._loaded_views)

    def _ensure_service(self):
        if self._service is None:
            raise ServiceNotBoundError()

    def _check_view_and_load(self, view):
        """Fetch ``view`` unless it (or ``FULL``) is already loaded.

        Only the fields populated by ``view`` are overwritten; other fields of
        the snapshot keep their values.
        """
        self._ensure_service()
        if view in self._loaded_views or View.FULL in self._loaded_views:
            return

        setters = _setters_for(view)
        _LOGGER.debug("Loading %s view of %s", View(view).name, self._path)
        table_pb = self._service.get_table(self.instance_id, self.table_id, view=view)
        self._loaded_views.add(View(view))
        for setter in setters:
            setter(self._snapshot, table_pb)

    def reload(self, view=None):
        """Reload table information.

        Replaces the whole snapshot and forgets every other loaded view.

        :type view: int
        :param view: (Optional) Table view type. Defaults to
                     :attr:`View.SCHEMA_VIEW`. Valid view types are:

                     * ``NAME_ONLY`` - Only populates ``name``
                     * ``SCHEMA_VIEW`` - Only populates ``name`` and fields
                       related to the table's schema
                     * ``REPLICATION_VIEW`` - Only populates ``name`` and
                       fields related to the table's replication state.
                     * ``FULL`` - Populates all fields

        :rtype: :class:`Table`
        :returns: This table.
        """
        self._ensure_service()
        view = View(view) if view is not None else View.SCHEMA_VIEW
        _setters_for(view)
        table_pb = self._service.get_table(self.instance_id, self.table_id, view=view)
        self._view = view
        self._snapshot = TableSnapshot.from_pb(table_pb)
        self._loaded_views = {view}
        return self

    @property
    def cluster_states(self):
        """Per-cluster replication state of the table.

        If it could not be determined whether or not the table has data in a
        particular cluster (for example, if its zone is unavailable), then
        there is an entry for the cluster with ``STATE_NOT_KNOWN`` state.

        :rtype: list
        :returns: List of :class:`ClusterState`.
        """
        self._check_view_and_load(View.REPLICATION_VIEW)
        return [
            ClusterState.from_pb(state_pb, cluster_name)
            for cluster_name, state_pb in self._snapshot.cluster_states.items()
        ]

    def column_families(self, update_fn=None):
        """Column families configured for the table, mapped by name.

        Loads the schema view if necessary.

        If ``update_fn`` is given it is called with a mutable copy of the
        map. The changes it makes are sent to the API in a single
        ``ModifyColumnFamilies`` request (none is sent when nothing
        changed). Either all or none of the modifications occur, but data
        requests received before the call returns may see a table where only
        some modifications have taken effect.

        For example::

            def edit(cfm):
                cfm.add("cf4", gc_rule=gc_rule.max_age(600))
                cfm.update("cf2", gc_rule=gc_rule.max_versions(3))
                cfm.delete("cf3")

            table.column_families(edit)

        :type update_fn: callable
        :param update_fn: (Optional) Called with a mutable
                          :class:`ColumnFamilyMap`.

        :rtype: :class:`ColumnFamilyMap`
        :returns: A frozen map of the (server-confirmed) column families.
        """
        self._check_view_and_load(View.SCHEMA_VIEW)

        if update_fn is not None:
            column_families = ColumnFamilyMap.from_pb(self._snapshot.column_families)
            update_fn(column_families)
            modifications = column_families.modifications(
                self._snapshot.column_families
            )
            if modifications:
                table_pb = self._service.modify_column_families(
                    self.instance_id, self.table_id, modifications
                )
                for setter in _SETTERS_BY_VIEW[View.SCHEMA_VIEW]:
                    setter(self._snapshot, table_pb)

        return ColumnFamilyMap.from_pb(self._snapshot.column_families).freeze()

    @property
    def granularity(self):
        """The granularity at which timestamps are stored in this table.

        Timestamps not matching the granularity will be rejected. If
        unspecified at creation time, the value is set to ``MILLIS``.

        :rtype: :class:`~google.cloud.admin_surface.bigtable.enums.Granularity`
        """
        self._check_view_and_load(View.SCHEMA_VIEW)
        return Granularity(self._snapshot.granularity)

    def is_granularity_millis(self):
        """Whether the table keeps data versioned at a granularity of 1 ms."""
        return self.granularity == Granularity.MILLIS

    def delete(self):
        """Permanently deletes the table.

        :rtype: bool
        :returns: ``True`` once the table was deleted.
        """
        self._ensure_service()
        self._service.delete_table(self.instance_id, self.table_id)
        return True

    def exists(self):
        """Check whether the table exists.

        :rtype: bool
        :returns: True if the table exists, else False.
        :raises: :class:`google.api_core.exceptions.GoogleAPICallError` for
                 any failure other than ``NotFound``.
        """
        self._ensure_service()
        lookup = self._service.lookup_table(
            self.instance_id, self.table_id, view=View.NAME_ONLY
        )
        if lookup.found:
            return True
        if lookup.not_found:
            return False
        raise lookup.error

    def generate_consistency_token(self):
        """Generates a consistency token for the table.

        The token can be used in :meth:`check_consistency` to check whether
        mutations to the table that finished before this call started have
        been replicated. Tokens are available for 90 days.

        :rtype: str
        """
        self._ensure_service()
        return self._service.generate_consistency_token(self.instance_id, self.table_id)

    def check_consistency(self, token):
        """Checks replication consistency based on a consistency token.

        :type token: str
        :param token: A token from :meth:`generate_consistency_token`.

        :rtype: bool
        :returns: Whether replication has caught up with the token.
        """
        self._ensure_service()
        return self._service.check_consistency(self.instance_id, self.table_id, token)

    def wait_for_replication(
        self, timeout=DEFAULT_REPLICATION_TIMEOUT, check_interval=DEFAULT_CHECK_INTERVAL
    ):
        """Wait until replication has caught up, or ``timeout`` elapses.

        Generates one consistency token, then checks it every
        ``check_interval`` seconds. The check always runs at least once, and
        the deadline is only evaluated after a check, so the call may
        overrun ``timeout`` by the duration of one request.

        :type timeout: float
        :param timeout: Timeout in seconds. Defaults to 600 seconds.

        :type check_interval: float
        :param check_interval: Seconds between checks. Defaults to 5 seconds.

        :rtype: bool
        :returns: ``True`` if replication became consistent, ``False`` if the
                  timeout elapsed first.
        :raises: :class:`google.api_core.exceptions.InvalidArgument` if
                 ``check_interval`` is greater than ``timeout``.
        """
        if check_interval > timeout:
            raise core_exceptions.InvalidArgument(
                "'check_interval' can not be greater than 'timeout'"
            )

        token = self.generate_consistency_token()
        start_at = time.monotonic()
        attempt = 0

        while True:
            attempt += 1
            consistent = self.check_consistency(token)
            elapsed = time.monotonic() - start_at
            _LOGGER.debug(
                "Replication check %d for %s: consistent=%s (%.1fs elapsed)",
                attempt,
                self._path,
                consistent,
                elapsed,
            )
            if consistent:
                return True
            if elapsed >= timeout:
                return False
            time.sleep(check_interval)

    def delete_all_rows(self, timeout=None):
        """Deletes all rows.

        :type timeout: float
        :param timeout: (Optional) Call timeout in seconds. Use in case of
                        insufficient deadline for ``DropRowRange``, then try
                        again with a longer request deadline.

        :rtype: bool
        """
        return self.drop_row_range(delete_all_data=True, timeout=timeout)

    def delete_rows_by_prefix(self, prefix, timeout=None):
        """Deletes rows using a row key prefix.

        :type prefix: bytes
        :param prefix: Row key prefix (for example, ``b"user"``).

        :type timeout: float
        :param timeout: (Optional) Call timeout in seconds.

        :rtype: bool
        """
        return self.drop_row_range(row_key_prefix=prefix, timeout=timeout)

    def drop_row_range(self, row_key_prefix=None, delete_all_data=None, timeout=None):
        """Drops a row range by row key prefix, or deletes all rows.

        :type row_key_prefix: bytes
        :param row_key_prefix: (Optional) Row key prefix.

        :type delete_all_data: bool
        :param delete_all_data: (Optional) Delete every row of the table.

        :type timeout: float
        :param timeout: (Optional) Call timeout in seconds.

        :rtype: bool
        """
        self._ensure_service()
        self._service.drop_row_range(
            self.instance_id,
            self.table_id,
            row_key_prefix=row_key_prefix,
            delete_all_data_from_table=delete_all_data,
            timeout=timeout,
        )
        return True

    @classmethod
    def create(
        cls,
        service,
        instance_id,
        table_id,
        column_families=None,
        granularity=None,
        initial_splits=None,
        configure=None,
    ):
        """Creates a table and returns a handle for it.

        The caller's ``column_families`` is never modified, and may be
        frozen: ``configure`` receives a mutable duplicate.

        :type service: :class:`~google.cloud.admin_surface.bigtable.service.Service`
        :param service: The service used for remote calls.

        :type instance_id: str
        :param instance_id: The ID of the instance owning the table.

        :type table_id: str
        :param table_id: The ID of the table to create.

        :type column_families: :class:`ColumnFamilyMap` or dict
        :param column_families: (Optional) Initial column families, either
                                a map or a dict of name to GC rule.

        :type granularity: int
        :param granularity: (Optional) Timestamp granularity.

        :type initial_splits: list
        :param initial_splits: (Optional) Row keys used to initially split
                               the table into several tablets.

        :type configure: callable
        :param configure: (Optional) Called with the mutable
                          :class:`ColumnFamilyMap` before the request is
                          sent.

        :rtype: :class:`Table`
        """
        if service is None:
            raise ServiceNotBoundError()

        if column_families is None:
            column_families = ColumnFamilyMap()
        elif isinstance(column_families, ColumnFamilyMap):
            column_families = column_families.copy()
        elif isinstance(column_families, Mapping):
            families = ColumnFamilyMap()
            for family_name, gc_rule in column_families.items():
                families.add(family_name, gc_rule=gc_rule)
            column_families = families
        else:
            raise TypeError("column_families must be a ColumnFamilyMap or a dict")

        if configure is not None:
            configure(column_families)

        table_kwargs = {"column_families": column_families.to_pb()}
        if granularity is not None:
            table_kwargs["granularity"] = granularity
        table_pb = table_pb2.Table(**table_kwargs)

        response = service.create_table(
            instance_id, table_id, table_pb, initial_splits=initial_splits
        )
        return cls.from_pb(response, service)

    @classmethod
    def from_pb(cls, table_pb, service, view=None):
        """Creates a handle from a :class:`~google.cloud.bigtable_admin_v2.types.Table`.

        :type view: int
        :param view: (Optional) The view ``table_pb`` was fetched with.
        """
        return cls(table_pb, service, view=view)

    @classmethod
    def from_path(cls, path, service):
        """Creates a handle from a table path, without fetching anything.

        :type path: str
        :param path: Table path of the form
                     ``projects/<project>/instances/<instance>/tables/<table>``.

        :raises: :class:`ValueError <exceptions.ValueError>` if ``path`` is
                 not of the expected format.
        """
        if _TABLE_NAME_RE.match(path) is None:
            raise ValueError(
                "Table path was not in the expected format.", path
            )
        return cls(table_pb2.Table(name=path), service, view=View.NAME_ONLY)
