from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Dict, Optional
from uuid import uuid4
import logging

from fitz.board import PlayerKind
from fitz.errors import FitzError, UsageError
from fitz.game import Game
from fitz.render import render_auto_move, render_board, render_tiles
from fitz.savefile import dump_save, load_save
from fitz.tiles import catalog_from_text

logging.basicConfig(level=logging.INFO)
log = logging.getLogger("fitz.server")

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

GAMES: Dict[str, Game] = {}

class NewGameRequest(BaseModel):
    tiles: str
    p1: str = "h"
    p2: str = "h"
    height: Optional[int] = None
    width: Optional[int] = None
    save: Optional[str] = None

class PlayRequest(BaseModel):
    row: int
    col: int
    rotation: int

def to_state(g: Game) -> dict:
    win = g.check_end()
    return {
        "grid": render_board(g.board).splitlines(),
        "turn": g.turn,
        "to_move": g.current_player().symbol,
        "tile": g.tiles.active,
        "terminal": g.terminal(),
        "winner": win.symbol if win is not None else None,
    }

def build_game(req: NewGameRequest) -> Game:
    tiles = catalog_from_text(req.tiles)
    g = Game(PlayerKind.parse(req.p1), PlayerKind.parse(req.p2))
    g.tiles = tiles
    if req.save is not None:
        load_save(req.save, g)
    elif req.height is not None and req.width is not None:
        g.start(req.height, req.width)
    else:
        raise UsageError("either save or height and width are required")
    return g

def get_game(gid: str) -> Game:
    g = GAMES.get(gid)
    if g is None:
        raise HTTPException(404, "unknown game")
    return g

@app.post("/new")
def new_game(req: NewGameRequest):
    try:
        g = build_game(req)
    except FitzError as e:
        raise HTTPException(400, e.message)
    gid = uuid4().hex
    GAMES[gid] = g
    log.info("game %s: %dx%d, %d tiles", gid, g.board.height, g.board.width, len(g.tiles))
    return {"game_id": gid, "state": to_state(g)}

@app.get("/state/{gid}")
def state(gid: str):
    return {"state": to_state(get_game(gid))}

@app.get("/tiles/{gid}")
def tiles(gid: str):
    g = get_game(gid)
    return {"active": g.tiles.active, "tiles": render_tiles(g.tiles)}

@app.get("/save/{gid}")
def save(gid: str):
    return {"save": dump_save(get_game(gid))}

@app.post("/play/{gid}")
def play(gid: str, req: PlayRequest):
    g = get_game(gid)
    if g.check_end() is not None:
        raise HTTPException(409, "game over")
    if g.current_player().kind != PlayerKind.HUMAN:
        raise HTTPException(400, "current player is automated")
    try:
        g.play(req.row, req.col, req.rotation)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"state": to_state(g)}

@app.post("/bot/{gid}")
def bot(gid: str):
    g = get_game(gid)
    if g.check_end() is not None:
        raise HTTPException(409, "game over")
    player = g.current_player()
    if player.kind == PlayerKind.HUMAN:
        raise HTTPException(400, "current player is human")
    mv = g.play_auto()
    st = to_state(g)
    if st["terminal"]:
        log.info("game %s: player %s wins", gid, st["winner"])
    return {"move": render_auto_move(player, mv), "state": st}
