"""Command handlers for notion CLI."""

from .init import cmd_init
from .search import cmd_search
from .users import cmd_users_me, cmd_users_get, cmd_users_list
from .pages import (
    cmd_pages_get,
    cmd_pages_create,
    cmd_pages_update,
    cmd_pages_move,
    cmd_pages_property,
)
from .blocks import (
    cmd_blocks_get,
    cmd_blocks_children,
    cmd_blocks_append,
    cmd_blocks_update,
    cmd_blocks_delete,
)
from .comments import cmd_comments_list, cmd_comments_create
from .databases import (
    cmd_db_get,
    cmd_ds_get,
    cmd_ds_create,
    cmd_ds_update,
    cmd_ds_query,
    cmd_ds_templates,
)
from .file_uploads import (
    cmd_file_uploads_create,
    cmd_file_uploads_send,
    cmd_file_uploads_complete,
    cmd_file_uploads_get,
    cmd_file_uploads_list,
    cmd_file_uploads_upload,
)

__all__ = [
    "cmd_init",
    "cmd_search",
    "cmd_users_me",
    "cmd_users_get",
    "cmd_users_list",
    "cmd_pages_get",
    "cmd_pages_create",
    "cmd_pages_update",
    "cmd_pages_move",
    "cmd_pages_property",
    "cmd_blocks_get",
    "cmd_blocks_children",
    "cmd_blocks_append",
    "cmd_blocks_update",
    "cmd_blocks_delete",
    "cmd_comments_list",
    "cmd_comments_create",
    "cmd_db_get",
    "cmd_ds_get",
    "cmd_ds_create",
    "cmd_ds_update",
    "cmd_ds_query",
    "cmd_ds_templates",
    "cmd_file_uploads_create",
    "cmd_file_uploads_send",
    "cmd_file_uploads_complete",
    "cmd_file_uploads_get",
    "cmd_file_uploads_list",
    "cmd_file_uploads_upload",
]
