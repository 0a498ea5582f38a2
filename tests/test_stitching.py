from voxlist.models import TranscriptChunk
from voxlist.session.stitching import merge_text, stitch_transcript


def _chunk(index: int, text: str, final: bool = True, segment: int = 0) -> TranscriptChunk:
    return TranscriptChunk(index=index, text=text, is_final=final, segment=segment)


def test_final_supersedes_interim() -> None:
    chunks = [_chunk(0, "two cuc", final=False), _chunk(1, "two cucumbers")]

    assert stitch_transcript(chunks) == "two cucumbers"
    assert stitch_transcript([_chunk(0, "two cucumbers")]) == "two cucumbers"


def test_cumulative_results_replace_accumulator() -> None:
    chunks = [_chunk(0, "two"), _chunk(1, "two cucumbers"), _chunk(2, "Two cucumbers and eggs")]

    assert stitch_transcript(chunks) == "Two cucumbers and eggs"


def test_boundary_overlap_is_spliced() -> None:
    chunks = [_chunk(0, "buy two cucumbers and"), _chunk(1, "cucumbers and eggs")]

    assert stitch_transcript(chunks) == "buy two cucumbers and eggs"


def test_overlap_must_align_with_words() -> None:
    assert merge_text("milk tea", "tea biscuits") == "milk tea biscuits"
    assert merge_text("steam", "team spirit") == "steam team spirit"


def test_unrelated_chunks_are_joined() -> None:
    assert stitch_transcript([_chunk(0, "milk"), _chunk(1, "eggs")]) == "milk eggs"


def test_repeated_chunk_is_dropped() -> None:
    assert stitch_transcript([_chunk(0, "milk and eggs"), _chunk(1, "eggs")]) == "milk and eggs"


def test_trailing_interim_is_appended() -> None:
    chunks = [_chunk(1, "and eg", final=False), _chunk(0, "milk")]

    assert stitch_transcript(chunks) == "milk and eg"


def test_segments_keep_their_order() -> None:
    chunks = [_chunk(0, "eggs", segment=1), _chunk(0, "milk", segment=0)]

    assert stitch_transcript(chunks) == "milk eggs"


def test_empty_and_blank_chunks() -> None:
    assert stitch_transcript([]) == ""
    assert stitch_transcript([_chunk(0, "   "), _chunk(1, "milk")]) == "milk"


def test_chunk_containing_earlier_text_mid_word_is_kept() -> None:
    assert stitch_transcript([_chunk(0, "tea"), _chunk(1, "steak")]) == "tea steak"
    assert stitch_transcript([_chunk(0, "steak"), _chunk(1, "tea")]) == "steak tea"
    assert stitch_transcript([_chunk(0, "ham"), _chunk(1, "graham crackers")]) == "ham graham crackers"


def test_prefix_must_end_on_a_word() -> None:
    assert merge_text("pea", "peanuts") == "pea peanuts"
    assert merge_text("peanuts", "pea") == "peanuts pea"
    assert merge_text("milk", "Milk and eggs") == "Milk and eggs"
    assert merge_text("milk and eggs", "milk") == "milk and eggs"
