"""Routing: an ordered route table compiled once at assembly time."""

from websurfx.routing.route import Route, RouteMatch
from websurfx.routing.router import Router

__all__ = ["Route", "RouteMatch", "Router"]
