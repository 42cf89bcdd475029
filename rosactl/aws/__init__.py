"""AWS resource clients."""

from ._account import CallerIdentity, get_caller_identity
from ._errors import handle_client_error, translate_client_error
from ._iam import IamOidcProviders, IamRoles
from ._lambda import LambdaFunctions
from ._logs import CloudWatchLogGroups
from ._session import AwsClients, ClientConfig, create_session
from .protocols import FunctionClient, IdentityProviderClient, LogGroupClient, RoleClient

__all__ = [
    "AwsClients",
    "CallerIdentity",
    "ClientConfig",
    "CloudWatchLogGroups",
    "FunctionClient",
    "IamOidcProviders",
    "IamRoles",
    "IdentityProviderClient",
    "LambdaFunctions",
    "LogGroupClient",
    "RoleClient",
    "create_session",
    "get_caller_identity",
    "handle_client_error",
    "translate_client_error",
]
