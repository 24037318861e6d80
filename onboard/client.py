# File: onboard/client.py

"""
Command-line client for the Onboard API.

Stands in for the web front end: each command is one screen (signup,
login, onboarding form, dashboard, admin table). The session (token +
user) is kept in a JSON file so it survives between invocations.

    onboard-client signup you@example.com
    onboard-client onboard --role Founder --team-size "6-20 people" --goal "Grow revenue"
    onboard-client dashboard
"""

import argparse
import getpass
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

import httpx

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_SESSION_FILE = Path.home() / ".onboard" / "session.json"


class ClientError(Exception):
    """An API call failed; message is what the server said."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SessionStore:
    """Token + user persisted to a JSON file."""

    def __init__(self, path: Path = DEFAULT_SESSION_FILE):
        self.path = path

    def load(self) -> Optional[dict[str, Any]]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict) or not data.get("token"):
            return None
        return data

    def save(self, token: str, user: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token, "user": user}), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    @property
    def token(self) -> Optional[str]:
        session = self.load()
        return session["token"] if session else None


class OnboardClient:
    def __init__(self, http: httpx.Client, session: SessionStore):
        self.http = http
        self.session = session

    @classmethod
    def connect(cls, base_url: str, session: SessionStore) -> "OnboardClient":
        http = httpx.Client(base_url=base_url.rstrip("/"), timeout=60.0)
        return cls(http, session)

    def _request(self, method: str, url: str, **kwargs) -> dict[str, Any]:
        headers = kwargs.pop("headers", {})
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            response = self.http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise ClientError(f"Could not reach the server: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.is_error or not body.get("success", False):
            message = (body.get("error") or {}).get("message") or f"HTTP {response.status_code}"
            raise ClientError(message, response.status_code)
        return body["data"]

    # ---------- auth ----------

    def signup(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/api/auth/signup", json={"email": email, "password": password})
        self.session.save(data["token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.session.save(data["token"], data["user"])
        return data["user"]

    def logout(self) -> None:
        self.session.clear()

    def me(self) -> dict[str, Any]:
        return self._request("GET", "/api/auth/me")["user"]

    # ---------- users ----------

    def update_profile(self, role: str, team_size: str, goal: str) -> dict[str, Any]:
        data = self._request(
            "PUT",
            "/api/users/profile",
            json={"role": role, "team_size": team_size, "goal": goal},
        )
        session = self.session.load()
        if session:
            self.session.save(session["token"], data["user"])
        return data

    def profile(self) -> dict[str, Any]:
        return self._request("GET", "/api/users/profile")

    def checklist(self) -> dict[str, Any]:
        return self._request("GET", "/api/users/checklist")

    def set_item(self, index: int, completed: bool = True) -> dict[str, Any]:
        return self._request("PUT", f"/api/users/checklist/{index}", json={"completed": completed})["item"]

    def list_users(self) -> dict[str, Any]:
        return self._request("GET", "/api/users")


# ---------- rendering ----------

def render_path(path: dict[str, Any], items: Optional[list[dict[str, Any]]] = None) -> str:
    lines = [path["name"]]
    if path.get("description"):
        lines.append(path["description"])
    lines.append("")
    for i, item in enumerate(items if items is not None else path["checklist"]):
        mark = "x" if item.get("completed") else " "
        lines.append(f"  [{mark}] {i + 1}. {item['title']} - {item['description']}")
    return "\n".join(lines)


def render_users(users: list[dict[str, Any]]) -> str:
    columns = ("email", "role", "team_size", "goal", "assignedPathName")
    headers = ("Email", "Role", "Team size", "Goal", "Path")
    rows = [[str(u.get(c) or "-") for c in columns] for u in users]
    widths = [max(len(h), *(len(r[i]) for r in rows)) if rows else len(h) for i, h in enumerate(headers)]
    out = ["  ".join(h.ljust(w) for h, w in zip(headers, widths))]
    out.append("  ".join("-" * w for w in widths))
    out.extend("  ".join(v.ljust(w) for v, w in zip(row, widths)) for row in rows)
    return "\n".join(out)


# ---------- commands ----------

def _require_session(client: OnboardClient) -> None:
    if client.session.load() is None:
        raise ClientError("You are not logged in. Please log in first.")


def _reject_session(client: OnboardClient) -> None:
    session = client.session.load()
    if session is not None:
        email = (session.get("user") or {}).get("email", "")
        raise ClientError(f"Already logged in as {email}. Run 'logout' first.")


def _password(args: argparse.Namespace) -> str:
    return args.password or getpass.getpass("Password: ")


def cmd_signup(client: OnboardClient, args: argparse.Namespace) -> str:
    _reject_session(client)
    user = client.signup(args.email, _password(args))
    return f"Account created for {user['email']}. Next: run 'onboard' to get your path."


def cmd_login(client: OnboardClient, args: argparse.Namespace) -> str:
    _reject_session(client)
    user = client.login(args.email, _password(args))
    return f"Logged in as {user['email']}."


def cmd_logout(client: OnboardClient, _args: argparse.Namespace) -> str:
    client.logout()
    return "Logged out."


def cmd_onboard(client: OnboardClient, args: argparse.Namespace) -> str:
    _require_session(client)
    data = client.update_profile(args.role, args.team_size, args.goal)
    return f"{data['welcomeMessage']}\n\n{render_path(data['path'])}"


def cmd_dashboard(client: OnboardClient, _args: argparse.Namespace) -> str:
    _require_session(client)
    data = client.profile()
    if data["path"] is None:
        return "No onboarding path yet. Run 'onboard' to complete your profile."
    progress = client.checklist()
    return render_path(progress["path"], progress["items"])


def cmd_complete(client: OnboardClient, args: argparse.Namespace) -> str:
    _require_session(client)
    item = client.set_item(args.item - 1, completed=not args.undo)
    state = "done" if item["completed"] else "not done"
    return f"{item['title']}: {state}"


def cmd_admin(client: OnboardClient, _args: argparse.Namespace) -> str:
    _require_session(client)
    data = client.list_users()
    return f"{render_users(data['users'])}\n\nTotal users: {data['total']}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="onboard-client", description="Onboard API client")
    parser.add_argument(
        "--api-url",
        default=os.getenv("ONBOARD_API_URL", DEFAULT_API_URL),
        help="server base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--session-file",
        type=Path,
        default=Path(os.getenv("ONBOARD_SESSION_FILE", str(DEFAULT_SESSION_FILE))),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func in (("signup", cmd_signup), ("login", cmd_login)):
        p = sub.add_parser(name)
        p.add_argument("email")
        p.add_argument("--password")
        p.set_defaults(func=func)

    sub.add_parser("logout").set_defaults(func=cmd_logout)

    p = sub.add_parser("onboard", help="complete your profile and get a path")
    p.add_argument("--role", required=True)
    p.add_argument("--team-size", required=True)
    p.add_argument("--goal", required=True)
    p.set_defaults(func=cmd_onboard)

    sub.add_parser("dashboard", help="show your checklist").set_defaults(func=cmd_dashboard)

    p = sub.add_parser("complete", help="tick a checklist item (1-based)")
    p.add_argument("item", type=int)
    p.add_argument("--undo", action="store_true")
    p.set_defaults(func=cmd_complete)

    sub.add_parser("admin", help="list all users").set_defaults(func=cmd_admin)
    return parser


def main(argv: Optional[list[str]] = None, client: Optional[OnboardClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or OnboardClient.connect(args.api_url, SessionStore(args.session_file))
    try:
        print(args.func(client, args))
    except ClientError as exc:
        if exc.status_code == 401:
            client.session.clear()
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
