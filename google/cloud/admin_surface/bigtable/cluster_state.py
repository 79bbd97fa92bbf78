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

from google.cloud.admin_surface.bigtable.enums import ReplicationState


class ClusterState(object):
    """Replication state of a table within one cluster.

    :type cluster_name: str
    :param cluster_name: The ID of the cluster.

    :type replication_state: int
    :param replication_state: enum value for cluster state
        Possible replications_state values are
        STATE_NOT_KNOWN: The replication state of the table is unknown in
        this cluster.
        INITIALIZING: The cluster was recently created, and the table must
        finish copying over pre-existing data from other clusters before it
        can begin receiving live replication updates and serving
        ``Data API`` requests.
        PLANNED_MAINTENANCE: The table is temporarily unable to serve
        ``Data API`` requests from this cluster due to planned internal
        maintenance.
        UNPLANNED_MAINTENANCE: The table is temporarily unable to serve
        ``Data API`` requests from this cluster due to unplanned or
        emergency maintenance.
        READY: The table can serve ``Data API`` requests from this cluster.
        READY_OPTIMIZING: The table is fully created and ready for use after
        a restore, and is being optimized for performance.
    """

    def __init__(self, cluster_name, replication_state):
        self.cluster_name = cluster_name
        self.replication_state = ReplicationState(replication_state)

    def __repr__(self):
        return "<ClusterState {}: {}>".format(
            self.cluster_name, self.replication_state.name
        )

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return (
            self.cluster_name == other.cluster_name
            and self.replication_state == other.replication_state
        )

    def __ne__(self, other):
        return not self == other

    @property
    def state_not_known(self):
        return self.replication_state == ReplicationState.STATE_NOT_KNOWN

    @property
    def initializing(self):
        return self.replication_state == ReplicationState.INITIALIZING

    @property
    def planned_maintenance(self):
        return self.replication_state == ReplicationState.PLANNED_MAINTENANCE

    @property
    def unplanned_maintenance(self):
        return self.replication_state == ReplicationState.UNPLANNED_MAINTENANCE

    @property
    def ready(self):
        return self.replication_state == ReplicationState.READY

    @property
    def ready_optimizing(self):
        return self.replication_state == ReplicationState.READY_OPTIMIZING

    @classmethod
    def from_pb(cls, cluster_state_pb, cluster_name):
        """Creates a cluster state from a ``Table.ClusterState`` message.

        :type cluster_state_pb: :class:`~google.cloud.bigtable_admin_v2.types.Table.ClusterState`
        :param cluster_state_pb: The message to convert.

        :type cluster_name: str
        :param cluster_name: The key of the message in ``cluster_states``.
        """
        return cls(cluster_name, cluster_state_pb.replication_state)
