from moduleone.megaphone import FEEDBACK_NOISE, main, shout


def test_no_words_gives_feedback_noise():
    assert shout([]) == "* LOUD AND UNBEARABLE FEEDBACK NOISE *"


def test_words_are_upper_cased_and_space_joined():
    assert shout(["shhhhh...", "I think the students are asleep..."]) == (
        "SHHHHH... I THINK THE STUDENTS ARE ASLEEP..."
    )


def test_single_word_has_no_separator():
    result = shout(["Damnit"])
    assert result == "DAMNIT"
    assert not result.endswith(" ")


def test_output_is_upper_case_of_input():
    words = ["abc", "Def", "g h"]
    result = shout(words)
    assert result == result.upper()
    assert result.lower() == " ".join(w.lower() for w in words)


def test_main_prints_noise_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == FEEDBACK_NOISE + "\n"


def test_main_prints_shouted_arguments(capsys):
    assert main(["hello", "world"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n")
    assert out.strip() == shout(["hello", "world"])