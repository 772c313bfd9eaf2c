# moves.py
from enum import IntEnum


class InvalidMoveError(ValueError):
    """不在 18 种合法转动之内的动作 (或无法解析的记号)。"""


class Face(IntEnum):
    U = 0
    F = 1
    R = 2
    B = 3
    L = 4
    D = 5


class Turn(IntEnum):
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1
    HALF = 2


class Move(IntEnum):
    """
    18 种合法转动，序号 0..17 连续。
    每个面一组 (U, F, R, B, L, D)，组内顺序为 {顺时针, 逆时针, 180度}。
    序号既是随机采样的取值范围，也是逆操作表的下标。
    """
    U = 0
    Up = 1
    U2 = 2
    F = 3
    Fp = 4
    F2 = 5
    R = 6
    Rp = 7
    R2 = 8
    B = 9
    Bp = 10
    B2 = 11
    L = 12
    Lp = 13
    L2 = 14
    D = 15
    Dp = 16
    D2 = 17

    @property
    def face(self):
        return Face(self.value // 3)

    @property
    def turn(self):
        return Turn(self.value % 3)

    def inverse(self):
        return inverse_move(self)

    def __str__(self):
        return move_to_str(self)


NUM_MOVES = len(Move)

# 18 种合法转动的记号，按 Move 的序号排列
MOVES_POOL = [
    'U', 'U\'', 'U2', 'F', 'F\'', 'F2',
    'R', 'R\'', 'R2', 'B', 'B\'', 'B2',
    'L', 'L\'', 'L2', 'D', 'D\'', 'D2'
]
MOVE_TO_STR = {m: MOVES_POOL[m.value] for m in Move}
STR_TO_MOVE = {s: m for m, s in MOVE_TO_STR.items()}

# 逆操作表: 顺时针 <-> 逆时针，180 度保持不变。模块加载时建好，之后只读。
INVERTED_MOVES = (
    Move.Up,  # U
    Move.U,   # U'
    Move.U2,  # U2
    Move.Fp,  # F
    Move.F,   # F'
    Move.F2,  # F2
    Move.Rp,  # R
    Move.R,   # R'
    Move.R2,  # R2
    Move.Bp,  # B
    Move.B,   # B'
    Move.B2,  # B2
    Move.Lp,  # L
    Move.L,   # L'
    Move.L2,  # L2
    Move.Dp,  # D
    Move.D,   # D'
    Move.D2,  # D2
)


def make_move(face, turn):
    """由 (面, 转向) 组合出对应的 Move。"""
    return Move(Face(face).value * 3 + Turn(turn).value)


def move_from_idx(move_idx):
    """
    把 0..17 的整数转换成 Move。
    超出范围 (或不是整数) 时抛 InvalidMoveError，而不是直接强转。
    """
    if isinstance(move_idx, bool) or not isinstance(move_idx, int):
        raise InvalidMoveError(f"未知动作: {move_idx!r}")
    if not 0 <= move_idx < NUM_MOVES:
        raise InvalidMoveError(f"未知动作: {move_idx!r}")
    return Move(move_idx)


def move_to_str(move):
    """
    把 Move -> 'R','R2','R'' 等记号。
    非法输入不报错，返回空字符串。
    """
    if isinstance(move, bool) or not isinstance(move, int):
        return ''
    return MOVE_TO_STR.get(move, '')


def parse_move(move_str):
    """把单个记号 (如 'R','R'','R2') -> Move，未知记号抛 InvalidMoveError。"""
    if not isinstance(move_str, str):
        raise InvalidMoveError(f"未知动作: {move_str!r}")
    move = STR_TO_MOVE.get(move_str.strip())
    if move is None:
        raise InvalidMoveError(f"未知动作: {move_str!r}")
    return move


def inverse_move(move):
    """给定一个转动，返回它的逆操作 (查表)。"""
    return INVERTED_MOVES[move_from_idx(move)]


def random_move(rng):
    """
    从 18 种转动中均匀随机取一个。
    rng: 外部传入的随机源，只需提供 next(bound) -> [0, bound) 的整数。
         每次调用只取一次值，不会重设种子。
    """
    return move_from_idx(rng.next(NUM_MOVES))
