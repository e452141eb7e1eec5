"""
This module contains the various permission types. A permission is essentially
just an object (either function or class) that can be called asynchronously
and raises a RoutePermissionError in the case of a failed permission.
"""

from tambula.permissions.decorators import requires
from tambula.permissions.permission import Permission, RoutePermissionError
from tambula.permissions.tokens import ValidToken
