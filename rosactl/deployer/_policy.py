"""IAM policy documents used when deploying the provisioner."""

from __future__ import annotations

from awacs import awslambda, iam, logs, sts
from awacs.aws import (
    Allow,
    Condition,
    Policy,
    PolicyDocument,
    Principal,
    Statement,
    StringEquals,
)

from ..exceptions import InvalidArgumentError

POLICY_VERSION = "2012-10-17"


def trust_policy() -> PolicyDocument:
    """Policy allowing AWS Lambda to assume the execution role."""
    return PolicyDocument(
        Version=POLICY_VERSION,
        Statement=[
            Statement(
                Effect=Allow,
                Principal=Principal("Service", "lambda.amazonaws.com"),
                Action=[sts.AssumeRole],
            )
        ],
    )


def permissions_policy() -> PolicyDocument:
    """Permissions the provisioner needs at runtime.

    Management of OIDC providers and writing its own logs.

    """
    return PolicyDocument(
        Version=POLICY_VERSION,
        Statement=[
            Statement(
                Effect=Allow,
                Action=[
                    iam.CreateOpenIDConnectProvider,
                    iam.GetOpenIDConnectProvider,
                    iam.ListOpenIDConnectProviders,
                    iam.TagOpenIDConnectProvider,
                ],
                Resource=["*"],
            ),
            Statement(
                Effect=Allow,
                Action=[logs.CreateLogGroup, logs.CreateLogStream, logs.PutLogEvents],
                Resource=["arn:aws:logs:*:*:*"],
            ),
        ],
    )


def resource_policy(invoker_role_arn: str, source_account_id: str) -> PolicyDocument:
    """Function policy allowing a role of the source account to invoke it.

    Args:
        invoker_role_arn: ARN of the role allowed to invoke the function.
        source_account_id: Account the invocation must originate from.

    Raises:
        InvalidArgumentError: Either argument is empty.

    """
    if not invoker_role_arn:
        raise InvalidArgumentError("invoker_role_arn")
    if not source_account_id:
        raise InvalidArgumentError("source_account_id")
    return PolicyDocument(
        Version=POLICY_VERSION,
        Statement=[
            Statement(
                Effect=Allow,
                Principal=Principal("AWS", invoker_role_arn),
                Action=[awslambda.InvokeFunction],
                Resource=["*"],
                Condition=Condition(StringEquals("aws:SourceAccount", source_account_id)),
            )
        ],
    )


def to_json(policy: Policy) -> str:
    """Render a policy as the compact JSON string expected by AWS APIs."""
    return policy.to_json(indent=None, sort_keys=False)
