# move_sequence.py
from moves import move_from_idx, move_to_str, inverse_move, parse_move


class MoveSequence:
    """
    有序的转动序列 (打乱或还原公式)，顺序即执行顺序，可以为空。
    外部调用者只追加 (append / extend)；取逆会生成新序列，不修改原序列。
    """

    def __init__(self, moves=None):
        # 拷贝一份，不持有调用者的列表；非法元素抛 InvalidMoveError
        self.moves = [move_from_idx(m) for m in moves] if moves is not None else []

    @classmethod
    def from_str(cls, text):
        return cls(parse_move(tok) for tok in text.split())

    def append(self, move):
        self.moves.append(move_from_idx(move))

    def extend(self, moves):
        self.moves.extend([move_from_idx(m) for m in moves])

    def inverted(self):
        return invert_sequence(self)

    def __len__(self):
        return len(self.moves)

    def __iter__(self):
        return iter(self.moves)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return MoveSequence(self.moves[idx])
        return self.moves[idx]

    def __eq__(self, other):
        if isinstance(other, MoveSequence):
            return self.moves == other.moves
        if isinstance(other, (list, tuple)):
            return self.moves == list(other)
        return NotImplemented

    def __str__(self):
        return format_sequence(self)

    def __repr__(self):
        return f"MoveSequence({format_sequence(self)!r})"


def format_sequence(sequence):
    """例如 [R, U, R', U'] -> "R U R' U'"；空序列返回 ""。非法元素的空记号不参与拼接。"""
    tokens = (move_to_str(m) for m in sequence)
    return ' '.join(tok for tok in tokens if tok)


def invert_sequence(sequence):
    """
    返回能撤销 sequence 的新序列:
    先将 sequence 反转，再对每个 move 取逆。
    [m1, ..., mn] -> [inv(mn), ..., inv(m1)]
    """
    return MoveSequence(inverse_move(m) for m in reversed(list(sequence)))


def parse_sequence(text):
    """把 "R U R' U'" 这样的字符串解析成 MoveSequence，按空白切分。"""
    return MoveSequence.from_str(text)
