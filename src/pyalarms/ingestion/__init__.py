"""Ingestion layer.

Turns decoded unit lists into alarm facts. Keeps "what counts as an alarm"
separate from "how facts are aggregated" (see :mod:`pyalarms.state`).
"""
