import unittest

from issue_map.density import (
    CLUSTER_COLORS,
    cell_key,
    cluster_color,
    cluster_markers,
    cluster_size,
    group_by_cell,
)
from issue_map.issues import aggregate_issues
from tests.fixtures import complaint


def issues_at(*coords):
    return aggregate_issues(
        [complaint(id=f"c-{n}", latitude=lat, longitude=lng) for n, (lat, lng) in enumerate(coords)],
        [],
    )


class TestGroupByCell(unittest.TestCase):
    def test_close_issues_share_a_cell(self):
        cells = group_by_cell(issues_at((21.25140, 81.62960), (21.25144, 81.62961)))
        self.assertEqual(list(cells), [(21.251, 81.630)])
        cell = cells[(21.251, 81.630)]
        self.assertEqual(cell["count"], 2)
        self.assertEqual([i.id for i in cell["issues"]], ["c-0", "c-1"])
        self.assertEqual((cell["lat"], cell["lng"]), (21.251, 81.63))

    def test_first_occurrence_order(self):
        cells = group_by_cell(issues_at((21.30, 81.70), (21.25, 81.63), (21.30, 81.70)))
        self.assertEqual(list(cells), [(21.3, 81.7), (21.25, 81.63)])
        self.assertEqual([c["count"] for c in cells.values()], [2, 1])

    def test_latitude_and_longitude_round_independently(self):
        cells = group_by_cell(issues_at((21.2514, 81.6296), (21.2514, 81.6306)))
        self.assertEqual(len(cells), 2)

    def test_issues_without_coordinates_skipped(self):
        issues = issues_at((21.2514, 81.6296), (None, 81.6296), (21.2514, ""))
        cells = group_by_cell(issues)
        self.assertEqual(sum(c["count"] for c in cells.values()), 1)

    def test_empty(self):
        self.assertEqual(group_by_cell([]), {})

    def test_cell_key(self):
        self.assertEqual(cell_key(21.25144, 81.62961), (21.251, 81.63))


class TestClusterStyle(unittest.TestCase):
    def test_size(self):
        self.assertEqual(cluster_size(1), 32)
        self.assertEqual(cluster_size(5), 40)
        self.assertEqual(cluster_size(10), 50)
        self.assertEqual(cluster_size(100), 50)

    def test_color_tiers(self):
        self.assertEqual(cluster_color(1), CLUSTER_COLORS["low"])
        self.assertEqual(cluster_color(2), CLUSTER_COLORS["low"])
        self.assertEqual(cluster_color(3), CLUSTER_COLORS["mid"])
        self.assertEqual(cluster_color(7), CLUSTER_COLORS["mid"])
        self.assertEqual(cluster_color(8), CLUSTER_COLORS["high"])

    def test_cluster_markers(self):
        coords = [(21.2514, 81.6296)] * 4 + [(21.30, 81.70)]
        markers = cluster_markers(group_by_cell(issues_at(*coords)))
        self.assertEqual(len(markers), 2)
        self.assertEqual(markers[0]["count"], 4)
        self.assertEqual(markers[0]["size"], 38)
        self.assertEqual(markers[0]["tier"], "mid")
        self.assertEqual(markers[0]["issue_ids"], ["c-0", "c-1", "c-2", "c-3"])
        self.assertEqual(markers[1]["tier"], "low")


if __name__ == "__main__":
    unittest.main()
