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
#
"""Explicit client configuration.

A :class:`ClientConfig` is handed to a client when it is constructed. There
is no process-wide configuration registry: two clients built from two
configs never observe each other's settings.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import copy
import logging

from dataclasses import dataclass
from dataclasses import field

import grpc

from google.api_core import client_options as client_options_lib
from google.api_core import exceptions as core_exceptions
from google.api_core import retry as retries
from google.api_core.gapic_v1 import client_info as client_info_lib
from google.auth import credentials as ga_credentials  # type: ignore
from google.oauth2 import service_account  # type: ignore

from google.cloud.admin_surface import gapic_version as package_version


_LOGGER = logging.getLogger(__name__)

_RETRY_POLICY_KEYS = frozenset(
    ["initial_delay", "max_delay", "multiplier", "retry_codes"]
)

CredentialsType = Union[str, Dict[str, Any], ga_credentials.Credentials, None]


def _exception_class_for_code(code):
    """Map a status code name (or ``grpc.StatusCode``) to its api_core error."""
    if isinstance(code, str):
        try:
            code = grpc.StatusCode[code.upper()]
        except KeyError:
            raise ValueError("Unknown retry code: {!r}".format(code))
    return core_exceptions.exception_class_for_grpc_status(code)


@dataclass
class ClientConfig:
    """Settings used to construct a generated API client.

    Args:
        credentials: The path to a service account keyfile, the parsed
            contents of a keyfile, or a
            :class:`google.auth.credentials.Credentials` instance. If
            ``None``, credentials are inferred from the environment.
        lib_name: The library name as recorded in the user agent.
        lib_version: The library version as recorded in the user agent.
        interceptors: gRPC client interceptors run before every call.
        timeout: Default per-call timeout, in seconds.
        metadata: Additional gRPC headers sent with every call.
        retry_policy: Either a :class:`google.api_core.retry.Retry` or a dict
            with the keys ``initial_delay``, ``max_delay``, ``multiplier``
            (all numbers) and ``retry_codes`` (status code names).
        client_options: Options forwarded to the generated client, such as
            ``api_endpoint``.
    """

    credentials: CredentialsType = None
    lib_name: Optional[str] = None
    lib_version: Optional[str] = None
    interceptors: List[Any] = field(default_factory=list)
    timeout: Optional[float] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    retry_policy: Union[retries.Retry, Dict[str, Any], None] = None
    client_options: Union[client_options_lib.ClientOptions, Dict[str, Any], None] = None

    def __post_init__(self):
        if not isinstance(
            self.credentials, (str, dict, ga_credentials.Credentials, type(None))
        ):
            raise TypeError(
                "credentials must be a path, a keyfile dict or a Credentials "
                "object, got {}".format(type(self.credentials).__name__)
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if isinstance(self.retry_policy, dict):
            unknown = set(self.retry_policy) - _RETRY_POLICY_KEYS
            if unknown:
                raise ValueError(
                    "Unknown retry_policy keys: {}".format(", ".join(sorted(unknown)))
                )
        elif not isinstance(self.retry_policy, (retries.Retry, type(None))):
            raise TypeError("retry_policy must be a dict or a Retry")
        if isinstance(self.client_options, dict):
            self.client_options = client_options_lib.from_dict(self.client_options)

    def resolve_credentials(self) -> Optional[ga_credentials.Credentials]:
        """Turn the configured credentials into a ``Credentials`` object."""
        if isinstance(self.credentials, str):
            return service_account.Credentials.from_service_account_file(
                self.credentials
            )
        if isinstance(self.credentials, dict):
            return service_account.Credentials.from_service_account_info(
                self.credentials
            )
        return self.credentials

    def build_retry(self) -> Optional[retries.Retry]:
        """Build the retry applied to every call, if one is configured."""
        if self.retry_policy is None or isinstance(self.retry_policy, retries.Retry):
            return self.retry_policy

        policy = self.retry_policy
        retry_kwargs = {}
        if "initial_delay" in policy:
            retry_kwargs["initial"] = policy["initial_delay"]
        if "max_delay" in policy:
            retry_kwargs["maximum"] = policy["max_delay"]
        if "multiplier" in policy:
            retry_kwargs["multiplier"] = policy["multiplier"]
        codes = policy.get("retry_codes")
        if codes:
            exception_classes = tuple(_exception_class_for_code(c) for c in codes)
            retry_kwargs["predicate"] = retries.if_exception_type(*exception_classes)
        return retries.Retry(**retry_kwargs)

    def build_client_info(
        self, default_client_info: client_info_lib.ClientInfo
    ) -> client_info_lib.ClientInfo:
        """Copy ``default_client_info`` and stamp this library onto it."""
        client_info = copy.copy(default_client_info)
        client_info.client_library_version = package_version.__version__
        if self.lib_name:
            user_agent = self.lib_name
            if self.lib_version:
                user_agent = "{}/{}".format(user_agent, self.lib_version)
            client_info.user_agent = user_agent
        return client_info

    def call_metadata(self) -> Sequence[Tuple[str, str]]:
        return tuple(self.metadata.items())

    def client_kwargs(self, client_cls, default_client_info) -> Dict[str, Any]:
        """Keyword arguments for constructing ``client_cls``.

        When interceptors are configured the gRPC channel is created here and
        wrapped with them, and the transport is passed instead of the
        credentials.
        """
        credentials = self.resolve_credentials()
        client_info = self.build_client_info(default_client_info)

        if not self.interceptors:
            return {
                "credentials": credentials,
                "client_options": self.client_options,
                "client_info": client_info,
            }

        transport_cls = client_cls.get_transport_class("grpc")
        channel_kwargs = {"credentials": credentials}
        if self.client_options is not None and self.client_options.api_endpoint:
            channel_kwargs["host"] = self.client_options.api_endpoint
        channel = transport_cls.create_channel(**channel_kwargs)
        _LOGGER.debug(
            "Wrapping %s channel with %d interceptor(s)",
            transport_cls.__name__,
            len(self.interceptors),
        )
        transport_kwargs = {
            "channel": grpc.intercept_channel(channel, *self.interceptors),
            "client_info": client_info,
        }
        if "host" in channel_kwargs:
            transport_kwargs["host"] = channel_kwargs["host"]
        return {
            "transport": transport_cls(**transport_kwargs),
            "client_info": client_info,
        }
