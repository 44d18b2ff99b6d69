import random

from bit_stream import BitInputStream
from huffman_core import ALPH_SIZE, PSEUDO_EOF, HuffmanLogic, HuffmanNode


def _counts(data):
	return HuffmanLogic().count_frequencies(BitInputStream(data))


def _leaves(node):
	if node.is_leaf:
		return [node]
	return _leaves(node.left) + _leaves(node.right)


def _assert_full(node):
	if node.is_leaf:
		return
	assert node.left is not None and node.right is not None
	assert node.weight == node.left.weight + node.right.weight
	_assert_full(node.left)
	_assert_full(node.right)


def test_count_frequencies():
	counts = _counts(b'abracadabra')
	assert len(counts) == ALPH_SIZE
	assert counts[ord('a')] == 5
	assert counts[ord('b')] == 2
	assert counts[ord('r')] == 2
	assert counts[ord('c')] == 1
	assert counts[ord('d')] == 1
	assert sum(counts) == 11


def test_count_frequencies_empty():
	assert _counts(b'') == [0] * ALPH_SIZE


def test_count_frequencies_idempotent():
	data = bytes(random.Random(3).getrandbits(8) for _ in range(2048))
	assert _counts(data) == _counts(data)


def test_count_frequencies_consumes_source():
	source = BitInputStream(b'xyz')
	HuffmanLogic().count_frequencies(source)
	assert source.read_bits(1) is None


def test_single_symbol_gives_one_bit_code():
	logic = HuffmanLogic()
	root = logic.build_tree(_counts(b'A' * 1000))
	codes = logic.generate_codes(root)
	assert codes == {PSEUDO_EOF: '0', 65: '1'}
	assert root.weight == 1001


def test_empty_counts_pair_eof_with_placeholder():
	logic = HuffmanLogic()
	root = logic.build_tree([0] * ALPH_SIZE)
	assert not root.is_leaf
	assert sorted(leaf.symbol for leaf in _leaves(root)) == [0, PSEUDO_EOF]
	assert logic.generate_codes(root)[PSEUDO_EOF] == '1'


def test_ties_leave_in_creation_order():
	counts = [0] * ALPH_SIZE
	counts[ord('a')] = 1
	counts[ord('b')] = 1
	logic = HuffmanLogic()
	codes = logic.generate_codes(logic.build_tree(counts))
	assert codes == {PSEUDO_EOF: '0', ord('a'): '10', ord('b'): '11'}


def test_all_bytes_give_257_unique_leaves():
	root = HuffmanLogic().build_tree(_counts(bytes(range(256))))
	symbols = [leaf.symbol for leaf in _leaves(root)]
	assert len(symbols) == 257
	assert sorted(symbols) == list(range(257))
	_assert_full(root)


def test_codes_form_prefix_code():
	rng = random.Random(11)
	counts = [rng.choice((0, 1, 2, 5, 40, 900)) for _ in range(ALPH_SIZE)]
	logic = HuffmanLogic()
	codes = logic.generate_codes(logic.build_tree(counts))
	assert len(codes) == sum(1 for c in counts if c) + 1
	words = sorted(codes.values())
	for shorter, longer in zip(words, words[1:]):
		assert not longer.startswith(shorter)


def test_heavier_symbols_get_shorter_codes():
	counts = [0] * ALPH_SIZE
	counts[ord('e')] = 500
	counts[ord('z')] = 3
	counts[ord('q')] = 2
	logic = HuffmanLogic()
	codes = logic.generate_codes(logic.build_tree(counts))
	assert len(codes[ord('e')]) < len(codes[ord('z')])
	assert len(codes[ord('e')]) == 1


def test_build_tree_is_deterministic():
	logic = HuffmanLogic()
	counts = _counts(b'the quick brown fox jumps over the lazy dog')
	assert logic.generate_codes(logic.build_tree(counts)) == logic.generate_codes(logic.build_tree(counts))


def test_generate_codes_does_not_leak_between_calls():
	logic = HuffmanLogic()
	first = logic.generate_codes(logic.build_tree(_counts(b'aab')))
	second = logic.generate_codes(logic.build_tree(_counts(b'zz')))
	assert ord('a') in first
	assert ord('a') not in second


def test_lone_leaf_has_empty_code():
	assert HuffmanLogic().generate_codes(HuffmanNode(PSEUDO_EOF, 1)) == {PSEUDO_EOF: ''}
