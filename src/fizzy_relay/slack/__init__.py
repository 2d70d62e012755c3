"""Slack egress: Block Kit payload building and webhook forwarding."""

from fizzy_relay.slack.blocks import action_emoji, action_label, build_slack_payload
from fizzy_relay.slack.forwarder import SlackForwardError, forward_to_slack

__all__ = [
    "SlackForwardError",
    "action_emoji",
    "action_label",
    "build_slack_payload",
    "forward_to_slack",
]
