from pathfinding_lab.planning.frontiers import FIFOFrontier, PriorityFrontier


def test_fifo_order():
    frontier = FIFOFrontier()
    for cell in [(0, 0), (1, 0), (0, 1)]:
        frontier.push(cell)

    assert len(frontier) == 3
    assert [frontier.pop()[1] for _ in range(3)] == [(0, 0), (1, 0), (0, 1)]
    assert len(frontier) == 0


def test_priority_pops_smallest_key():
    frontier = PriorityFrontier()
    frontier.push((5, 5), (10.0, 2.0))
    frontier.push((1, 1), (4.0, 1.0))
    frontier.push((2, 2), (7.0, 3.0))

    key, cell = frontier.pop()
    assert cell == (1, 1)
    assert key == (4.0, 1.0)


def test_priority_ties_break_by_lower_cost_then_insertion():
    frontier = PriorityFrontier()
    # 同 f 时 g 小的优先
    frontier.push((3, 0), (6.0, 3.0))
    frontier.push((1, 0), (6.0, 1.0))
    # 完全相同的 key 按插入顺序
    frontier.push((2, 0), (6.0, 2.0))
    frontier.push((2, 1), (6.0, 2.0))

    order = [frontier.pop()[1] for _ in range(4)]
    assert order == [(1, 0), (2, 0), (2, 1), (3, 0)]


def test_priority_keeps_stale_duplicates():
    # 重新插入同一格子不会去重，过期判断交给调用方
    frontier = PriorityFrontier()
    frontier.push((1, 1), (5.0, 5.0))
    frontier.push((1, 1), (3.0, 3.0))

    assert len(frontier) == 2
    assert frontier.pop() == ((3.0, 3.0), (1, 1))
    assert frontier.pop() == ((5.0, 5.0), (1, 1))
