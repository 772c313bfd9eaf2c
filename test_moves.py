# 文件名: test_moves.py

import re
import unittest

import moves
from moves import Move, Face, Turn, InvalidMoveError


class FixedRandomSource:
    """按顺序返回预设值的假随机源，同时记录每次的 bound。"""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next(self, bound):
        self.bounds.append(bound)
        return self.values.pop(0)


class TestMoves(unittest.TestCase):

    def test_enum_layout(self):
        self.assertEqual(len(Move), 18)
        self.assertEqual(moves.NUM_MOVES, 18)
        self.assertEqual([m.value for m in Move], list(range(18)))
        # 每个面一组: {顺时针, 逆时针, 180度}
        self.assertEqual(Move.R.face, Face.R)
        self.assertEqual(Move.Rp.turn, Turn.COUNTER_CLOCKWISE)
        self.assertEqual(Move.D2.face, Face.D)
        self.assertEqual(Move.D2.turn, Turn.HALF)
        self.assertEqual(moves.make_move(Face.B, Turn.CLOCKWISE), Move.B)

    def test_move_to_str(self):
        self.assertEqual(moves.move_to_str(Move.U), 'U')
        self.assertEqual(moves.move_to_str(Move.Fp), "F'")
        self.assertEqual(moves.move_to_str(Move.L2), 'L2')
        self.assertEqual(str(Move.Dp), "D'")
        pattern = re.compile(r"^[UFRBLD]['2]?$")
        for m in Move:
            s = moves.move_to_str(m)
            self.assertTrue(pattern.fullmatch(s), s)
        self.assertEqual([moves.move_to_str(m) for m in Move], moves.MOVES_POOL)

    def test_move_to_str_invalid(self):
        # 非法输入返回空字符串，不抛异常
        self.assertEqual(moves.move_to_str(18), '')
        self.assertEqual(moves.move_to_str(-1), '')
        self.assertEqual(moves.move_to_str('R'), '')
        self.assertEqual(moves.move_to_str(None), '')
        self.assertEqual(moves.move_to_str([]), '')
        # 浮点数不属于 18 种转动
        self.assertEqual(moves.move_to_str(6.0), '')
        self.assertEqual(moves.move_to_str(0.0), '')

    def test_inverse_move(self):
        self.assertEqual(moves.inverse_move(Move.U), Move.Up)
        self.assertEqual(moves.inverse_move(Move.Up), Move.U)
        self.assertEqual(moves.inverse_move(Move.R2), Move.R2)
        self.assertEqual(Move.B.inverse(), Move.Bp)
        for m in Move:
            inv = moves.inverse_move(m)
            self.assertEqual(inv.face, m.face)
            self.assertEqual(moves.inverse_move(inv), m)
            if m.turn == Turn.HALF:
                self.assertEqual(inv, m)
            else:
                self.assertNotEqual(inv, m)

    def test_inverse_move_invalid(self):
        with self.assertRaises(InvalidMoveError):
            moves.inverse_move(18)
        with self.assertRaises(InvalidMoveError):
            moves.inverse_move(-1)
        with self.assertRaises(InvalidMoveError):
            moves.inverse_move("R")

    def test_move_from_idx(self):
        self.assertIs(moves.move_from_idx(0), Move.U)
        self.assertIs(moves.move_from_idx(17), Move.D2)
        for bad in (18, -1, 2.0, True, None):
            with self.assertRaises(InvalidMoveError):
                moves.move_from_idx(bad)
        # InvalidMoveError 也是 ValueError
        self.assertTrue(issubclass(InvalidMoveError, ValueError))

    def test_parse_move(self):
        self.assertIs(moves.parse_move('U'), Move.U)
        self.assertIs(moves.parse_move("R'"), Move.Rp)
        self.assertIs(moves.parse_move(' F2 '), Move.F2)
        for bad in ('XYZ', 'r', "R2'", '', None):
            with self.assertRaises(InvalidMoveError):
                moves.parse_move(bad)

    def test_random_move(self):
        rng = FixedRandomSource([0, 6, 17])
        self.assertIs(moves.random_move(rng), Move.U)
        self.assertIs(moves.random_move(rng), Move.R)
        self.assertIs(moves.random_move(rng), Move.D2)
        # 每次只取一次值，bound 固定为 18
        self.assertEqual(rng.bounds, [18, 18, 18])

    def test_random_move_out_of_range(self):
        with self.assertRaises(InvalidMoveError):
            moves.random_move(FixedRandomSource([18]))


if __name__ == '__main__':
    unittest.main()
