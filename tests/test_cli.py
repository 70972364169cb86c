from philosophers.cli import main


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Wrong number of arguments\n"
    assert captured.out == ""


def test_invalid_argument(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().err == "Invalid argument\n"


def test_single_philosopher(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    assert capsys.readouterr().out == "0\t1 has taken a fork\n50\t1 died\n"


def test_full_run_without_death(capsys):
    assert main(["3", "1000", "30", "30", "1"]) == 0
    output = capsys.readouterr().out
    assert "died" not in output
    assert output.count("is eating") == 3