"""
HTML Renderer

Pure functions that turn users into HTML documents. All user-supplied text is
escaped before it is placed in markup.
"""
from html import escape
from typing import Iterable

from userdesk.modules.users.domain.user import User

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.0-alpha3/dist/css/bootstrap.min.css"
EMPTY_PLACEHOLDER = "<p>No users found.</p>"

_FORMS = """
        <form action="/add" method="POST" class="mb-3">
            <input name="name" placeholder="Name" required class="form-control mb-1" />
            <input name="age" placeholder="Age" type="number" required class="form-control mb-1" />
            <input name="email" placeholder="Email" required class="form-control mb-1" />
            <button type="submit" class="btn btn-primary">Add User</button>
        </form>
        <form action="/delete" method="POST" class="mb-3">
            <input name="id" placeholder="User ID to Delete" required class="form-control mb-1" />
            <button type="submit" class="btn btn-danger">Delete User</button>
        </form>
        <form action="/edit" method="POST" class="mb-3">
            <input name="id" placeholder="User ID to Edit" required class="form-control mb-1" />
            <input name="name" placeholder="New Name" required class="form-control mb-1" />
            <input name="age" placeholder="New Age" type="number" required class="form-control mb-1" />
            <input name="email" placeholder="New Email" required class="form-control mb-1" />
            <button type="submit" class="btn btn-warning">Edit User</button>
        </form>"""


def render_page(body: str, title: str, with_forms: bool = True) -> str:
    """
    Wrap ``body`` in a full HTML document.

    The add/delete/edit forms are placed above the body unless ``with_forms``
    is False. ``body`` is inserted as-is; ``title`` is escaped.
    """
    safe_title = escape(title)
    forms = _FORMS if with_forms else ""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8" />
    <link href="{BOOTSTRAP_CSS}" rel="stylesheet">
    <title>{safe_title}</title>
</head>
<body>
    <div class="container mt-3">
        <h1>{safe_title}</h1>{forms}
        {body}
    </div>
</body>
</html>
"""


def _user_row(user: User) -> str:
    return (
        "        <tr>"
        f'<td><a href="/users/{user.id}">{user.id}</a></td>'
        f"<td>{escape(str(user.name))}</td>"
        f"<td>{user.age}</td>"
        f"<td>{escape(str(user.email))}</td>"
        "</tr>"
    )


def render_users_table(users: Iterable[User]) -> str:
    """Table of id/name/age/email, or the placeholder message when there are no users."""
    rows = [_user_row(user) for user in users]
    if not rows:
        return EMPTY_PLACEHOLDER
    body = "\n".join(rows)
    return f"""<table class="table table-striped">
    <thead>
        <tr><th>ID</th><th>Name</th><th>Age</th><th>Email</th></tr>
    </thead>
    <tbody>
{body}
    </tbody>
</table>"""


_DETAIL_LABELS = {"id": "ID", "name": "Name", "age": "Age", "email": "Email"}


def render_user_detail(user: User) -> str:
    items = "\n".join(
        f'    <dt class="col-sm-2">{_DETAIL_LABELS[key]}</dt>'
        f'<dd class="col-sm-10">{escape(str(value))}</dd>'
        for key, value in user.to_dict().items()
    )
    return f"""<dl class="row">
{items}
</dl>
<a href="/" class="btn btn-secondary">Back to all users</a>"""


def render_user_list_page(users: Iterable[User], title: str = "All Users") -> str:
    return render_page(render_users_table(users), title)


def render_user_detail_page(user: User) -> str:
    return render_page(render_user_detail(user), f"User {user.id}", with_forms=False)
