"""
Test cases for the batch matching run
"""
import json

import pandas as pd

from mentormatch.configs import default_config
from mentormatch.run import run_matching, main
from mentormatch.storage import MemStorage


class TestRunMatching:
    """Test cases for run_matching"""

    def test_end_to_end(self, mentors_csv, mentees_csv, tmp_path):
        output = tmp_path / "out" / "matches.csv"
        report = tmp_path / "out" / "report.json"
        storage = MemStorage()

        result = run_matching(
            default_config(),
            mentors_path=mentors_csv,
            mentees_path=mentees_csv,
            output_path=str(output),
            report_path=str(report),
            storage=storage,
        )

        assert result["success"]
        assert [m.id for m in storage.get_mentors()] == [1, 2]
        assert set(result["rankings"]) == {1, 2}
        assert result["rankings"][1][0].mentor.last_work_role == "Staff Engineer"
        assert result["rankings"][2][0].mentor.last_work_role == "Designer"

        matches = pd.read_csv(output)
        assert list(matches.columns) == ["mentee_id", "rank", "mentor_id", "last_work_role", "score", "percentage"]
        assert len(matches) == 4
        assert json.loads(report.read_text())["n_mentees"] == 2

    def test_json_output(self, mentors_csv, mentees_csv, tmp_path):
        output = tmp_path / "matches.json"
        run_matching(default_config(), mentors_csv, mentees_csv, output_path=str(output))
        rows = json.loads(output.read_text())
        assert rows[0]["rank"] == 1

    def test_scores_sorted_per_mentee(self, project_root, tmp_path):
        config = default_config()
        result = run_matching(
            config,
            mentors_path=f"{project_root}/data/sample_mentors.csv",
            mentees_path=f"{project_root}/data/sample_mentees.csv",
            output_path=str(tmp_path / "matches.csv"),
        )
        for results in result["rankings"].values():
            scores = [r.score for r in results]
            assert scores == sorted(scores, reverse=True)
            assert len(results) <= config["ranking"]["top_n"]


class TestMain:
    """Test cases for the command line entry point"""

    def test_success(self, mentors_csv, mentees_csv, tmp_path):
        argv = [
            "--mentors", mentors_csv,
            "--mentees", mentees_csv,
            "--output", str(tmp_path / "matches.csv"),
            "--top-n", "1",
            "--variant", "experience",
        ]
        assert main(argv) == 0
        assert len(pd.read_csv(tmp_path / "matches.csv")) == 2

    def test_validation_failure(self, tmp_path, mentees_csv):
        bad = tmp_path / "bad.csv"
        bad.write_text("last_work_role,skills\nLead,Go\n")
        argv = ["--mentors", str(bad), "--mentees", mentees_csv, "--output", str(tmp_path / "m.csv")]
        assert main(argv) == 1

    def test_missing_config(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
