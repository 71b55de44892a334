from gradval import GradVal, get_graph_stats, print_graph_summary, print_computation_graph
from gradval.core.graph_utils import collect_nodes


def _graph():
    x = GradVal(3.0)
    y = x * x + x
    return x, y


def test_collect_nodes_order():
    x, y = _graph()
    nodes = collect_nodes(y)
    assert len(nodes) == 3
    assert nodes[0] is x.node
    assert nodes[-1] is y.node


def test_graph_stats():
    _, y = _graph()
    stats = get_graph_stats(y)
    assert stats == {
        'nodes': 3,
        'edges': 4,
        'leaves': 1,
        'max_fan_in': 2,
        'max_fan_out': 3,
        'operations': {'NOOP': 1, 'MUL': 1, 'ADD': 1},
    }


def test_graph_stats_single_leaf():
    stats = get_graph_stats(GradVal(1.0))
    assert stats['nodes'] == 1
    assert stats['edges'] == 0
    assert stats['max_fan_in'] == 0
    assert stats['max_fan_out'] == 0


def test_print_graph_summary(capsys):
    _, y = _graph()
    stats = print_graph_summary(y)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "Total nodes:        3" in out
    assert stats['nodes'] == 3


def test_print_computation_graph(capsys):
    x, y = _graph()
    y.backward()
    print_computation_graph(y)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH STRUCTURE" in out
    assert "[leaf]" in out
    assert "<- [Node0, Node0]" in out
    assert "grad=7e+00" in out


def test_print_computation_graph_truncates(capsys):
    y = GradVal(0.0)
    for _ in range(30):
        y = y + 1.0
    print_computation_graph(y, max_nodes=5)
    out = capsys.readouterr().out
    assert "... (56 more nodes)" in out
