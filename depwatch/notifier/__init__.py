"""Delivery of digest messages to Slack, by e-mail and to several notifiers at once."""