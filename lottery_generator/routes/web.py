"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, redirect, render_template, request, url_for

from lottery_generator.errors import ValidationError
from lottery_generator.schemas.ticket import TicketSchema
from lottery_generator.services.ticket_service import GAMES
from lottery_generator.session_state import get_board, get_ticket_service


web_bp = Blueprint("web", __name__)

_tickets_schema = TicketSchema(many=True)


@web_bp.get("/")
def index():
    board = get_board()
    return render_template(
        "index.html",
        games=list(GAMES.values()),
        board={game: _tickets_schema.dump(tickets) for game, tickets in board.all().items()},
        has_tickets=not board.is_empty(),
    )


@web_bp.post("/")
def index_action():
    """Form fallback for the generate and clear buttons (post/redirect/get)."""

    action = str(request.form.get("action") or "")
    board = get_board()
    if action == "clear":
        board.clear()
    elif action in GAMES:
        ticket = get_ticket_service().generate(action)
        board.add([ticket])
    else:
        raise ValidationError(
            message="Invalid action",
            details={"action": [f"Must be one of {'|'.join([*GAMES, 'clear'])}"]},
        )
    return redirect(url_for("web.index"))


@web_bp.get("/favicon.ico")
def favicon() -> Response:
        svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <circle cx='32' cy='32' r='28' fill='#ffffff' stroke='#c8102e' stroke-width='4'/>
    <circle cx='44' cy='20' r='10' fill='#c8102e'/>
    <circle cx='44' cy='20' r='10' fill='none' stroke='#f2b700' stroke-width='2'/>
    <text x='28' y='42' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='20' font-weight='800' fill='#0b1220'>5+1</text>
</svg>"""

        return Response(svg, mimetype="image/svg+xml")
