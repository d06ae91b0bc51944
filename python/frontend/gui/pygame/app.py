"""Pygame GUI frontend.

Menu, play mode (scrambled board, hint only) and study mode (scramble,
hint, animated solve). The solver runs on a worker thread and hands its
path back through a queue, so the window keeps handling input while it
searches; the solution is then replayed one timed step per frame.
"""

from __future__ import annotations

import enum
import logging
import queue
import random
import threading

import pygame

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import is_tile_correct
from backend.models.errors import PuzzleError
from backend.models.move import SIZE
from backend.models.state import PuzzleState

logger = logging.getLogger(__name__)

STEP_DELAY = 0.35

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 420, 560
TILE_GAP = 6
BOARD_TOP = 76
TILE_PX = 120
BOARD_PX = SIZE * TILE_PX + (SIZE + 1) * TILE_GAP


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    WIN = "win"


class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(
            surf, self.hover if self._hot else self.bg, self.rect, border_radius=8
        )
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _solve_worker(layout: tuple[int, ...], results: queue.Queue) -> None:
    """Run the search off the UI thread; post the path or the error."""
    try:
        results.put(Solver.solve(layout))
    except PuzzleError as exc:
        results.put(exc)


class PygameApp:
    def __init__(self, rng: random.Random, delay: float) -> None:
        self._rng = rng
        self._delay_ms = int(delay * 1000)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("8-Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_tile = pygame.font.SysFont("Helvetica", 44, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._game: GamePlay | None = None
        self._study_mode = False
        self._status_msg = ""

        # solver / replay
        self._results: queue.Queue = queue.Queue()
        self._worker: threading.Thread | None = None
        self._replay: list[PuzzleState] = []
        self._replay_at = 0
        self._next_step_ms = 0

        self._build_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        bw = 220
        self._play_btn = _Btn(
            (_cx(bw), 220, bw, 50), "P L A Y", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._study_btn = _Btn(
            (_cx(bw), 284, bw, 46), "S T U D Y", self._f_btn,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw), 344, bw, 46), "Q U I T", self._f_btn,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )
        self._menu_btns = [self._play_btn, self._study_btn, self._quit_btn]

        y = BOARD_TOP + BOARD_PX + 14
        w, gap = 120, 10
        sx = _cx(3 * w + 2 * gap)
        self._scramble_btn = _Btn(
            (sx, y, w, 36), "SCRAMBLE (R)", self._f_btn,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._hint_btn = _Btn(
            (sx + w + gap, y, w, 36), "HINT (N)", self._f_btn,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._solve_btn = _Btn(
            (sx + 2 * (w + gap), y, w, 36), "SOLVE (V)", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )

        self._again_btn = _Btn(
            (_cx(bw), 420, bw, 50), "PLAY AGAIN", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._menu_btn = _Btn((_cx(bw), 484, bw, 46), "M E N U", self._f_btn)

    def _game_btns(self) -> list[_Btn]:
        if self._study_mode:
            return [self._scramble_btn, self._hint_btn, self._solve_btn]
        return [self._hint_btn]

    # ── helpers ─────────────────────────────────────────────────────────────

    @staticmethod
    def _fmt(seconds: float) -> str:
        m, s = divmod(int(seconds), 60)
        return f"{m:02d}:{s:02d}"

    @staticmethod
    def _tile_rect(index: int) -> pygame.Rect:
        r, c = divmod(index, SIZE)
        ox = _cx(BOARD_PX) + TILE_GAP
        return pygame.Rect(
            ox + c * (TILE_PX + TILE_GAP),
            BOARD_TOP + TILE_GAP + r * (TILE_PX + TILE_GAP),
            TILE_PX,
            TILE_PX,
        )

    @property
    def _busy(self) -> bool:
        return self._worker is not None or bool(self._replay)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("8 - PUZZLE", True, COL_TEXT), 100)
        for btn in self._menu_btns:
            btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        board = game.board

        if self._study_mode:
            header = self._f_title.render("Study  3×3", True, COL_YELLOW)
        else:
            header = self._f_title.render(
                f"Moves: {game.state.moves}    "
                f"Time: {self._fmt(game.state.elapsed_time)}",
                True,
                COL_PINK,
            )
        _blit_center(self._surf, header, 24)

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(BOARD_PX), BOARD_TOP, BOARD_PX, BOARD_PX),
            border_radius=10,
        )
        for index, val in enumerate(board.layout):
            if val == 0:
                continue
            rect = self._tile_rect(index)
            col = COL_GREEN if is_tile_correct(board.layout, index) else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = self._f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(lbl, lbl.get_rect(center=rect.center))

        for btn in self._game_btns():
            btn.draw(self._surf)

        y = self._hint_btn.rect.bottom + 12
        if self._status_msg:
            _blit_center(
                self._surf, self._f_small.render(self._status_msg, True, COL_YELLOW), y
            )
        footer = (
            "Arrows / WASD  slide     click  tile     M  menu     Esc  stop"
            if self._study_mode
            else "Arrows / WASD  slide     click  tile     R  new     M  menu"
        )
        _blit_center(self._surf, self._f_small.render(footer, True, COL_OVERLAY0), y + 24)

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        _blit_center(
            self._surf, self._f_big.render("★  S O L V E D  ★", True, COL_GREEN), 100
        )
        y = 200
        for txt in (f"Moves:  {game.state.moves}", f"Time:   {self._fmt(game.state.elapsed_time)}"):
            _blit_center(self._surf, self._f_title.render(txt, True, COL_YELLOW), y)
            y += 44
        self._again_btn.draw(self._surf)
        self._menu_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_btns:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._study_btn.hit(ev.pos):
                self._open_study()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_l:
                self._open_study()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None

        if self._busy:
            # Any key or click cancels a running replay; the search itself
            # is left to finish and its result is dropped.
            if ev.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self._cancel_solve()
            return True

        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_btns():
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._study_mode and self._scramble_btn.hit(ev.pos):
                self._do_scramble()
            elif self._hint_btn.hit(ev.pos):
                self._do_hint()
            elif self._study_mode and self._solve_btn.hit(ev.pos):
                self._do_solve()
            else:
                for index in range(SIZE * SIZE):
                    if self._tile_rect(index).collidepoint(ev.pos):
                        game.move_tile(index)
                        self._status_msg = ""
                        break
        elif ev.type == pygame.KEYDOWN:
            slides = {
                pygame.K_UP: "up",
                pygame.K_w: "up",
                pygame.K_DOWN: "down",
                pygame.K_s: "down",
                pygame.K_LEFT: "left",
                pygame.K_a: "left",
                pygame.K_RIGHT: "right",
                pygame.K_d: "right",
            }
            if ev.key in slides:
                game.slide(slides[ev.key])
                self._status_msg = ""
            elif ev.key == pygame.K_n:
                self._do_hint()
            elif ev.key == pygame.K_v and self._study_mode:
                self._do_solve()
            elif ev.key == pygame.K_r:
                if self._study_mode:
                    self._do_scramble()
                else:
                    self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
            self._menu_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._start_game()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── solver actions ──────────────────────────────────────────────────────

    def _do_hint(self) -> None:
        game = self._game
        assert game is not None
        if game.is_won:
            self._status_msg = "Already solved!"
            return
        hint = game.hint()
        if hint is None:
            self._status_msg = "Board is unsolvable"
        else:
            game.move(hint)
            self._status_msg = f"Hint: blank {hint.value}"

    def _do_solve(self) -> None:
        game = self._game
        assert game is not None
        if game.is_won:
            self._status_msg = "Already solved!"
            return
        self._results = queue.Queue()
        self._worker = threading.Thread(
            target=_solve_worker,
            args=(game.board.layout, self._results),
            daemon=True,
        )
        self._worker.start()
        self._status_msg = "Searching…"

    def _poll_solver(self) -> None:
        if self._worker is None:
            return
        try:
            outcome = self._results.get_nowait()
        except queue.Empty:
            return
        self._worker = None
        if isinstance(outcome, PuzzleError):
            self._status_msg = str(outcome)
            return
        self._replay = outcome
        self._replay_at = 1
        self._next_step_ms = pygame.time.get_ticks()

    def _step_replay(self) -> None:
        game = self._game
        if not self._replay or game is None:
            return
        if pygame.time.get_ticks() < self._next_step_ms:
            return
        step = self._replay[self._replay_at]
        game.move(step.move)
        total = len(self._replay) - 1
        self._status_msg = f"Solving… {self._replay_at}/{total}"
        self._replay_at += 1
        self._next_step_ms += self._delay_ms
        if self._replay_at > total:
            self._replay = []
            self._status_msg = f"Solved in {total} moves!"

    def _cancel_solve(self) -> None:
        if self._replay:
            self._status_msg = f"Stopped after {self._replay_at - 1} moves"
        else:
            self._status_msg = "Search cancelled"
        self._replay = []
        self._worker = None
        self._results = queue.Queue()

    def _do_scramble(self) -> None:
        assert self._game is not None
        self._game.scramble()
        self._status_msg = "Scrambled!"

    def _open_study(self) -> None:
        """Enter study mode — starts from the solved board."""
        self._study_mode = True
        self._game = GamePlay.from_layout(PuzzleState.goal().layout, self._rng)
        self._status_msg = ""
        self._screen = _Screen.PLAYING

    def _start_game(self) -> None:
        self._game = GamePlay(self._rng)
        self._study_mode = False
        self._status_msg = ""
        self._screen = _Screen.PLAYING

    def _check_win(self) -> None:
        game = self._game
        if game is None or not game.is_won:
            return
        game.state.pause()
        logger.debug("Won in %d moves", game.state.moves)
        self._screen = _Screen.WIN

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not dispatch[self._screen](ev):
                    running = False
                    break

            if self._screen == _Screen.PLAYING:
                self._poll_solver()
                self._step_replay()
                if not self._study_mode:
                    self._check_win()

            draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


def run(rng: random.Random | None = None, delay: float = STEP_DELAY) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    PygameApp(rng or random.Random(), delay).run_loop()
