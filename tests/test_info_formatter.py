import io
import json
import struct

import pytest

from riffwave import WaveReader, descriptor_to_dict, format_info

from conftest import chunk, extensible_fmt_body, pcm_fmt_body, riff


@pytest.fixture
def full_reader():
    data = riff(
        chunk(b'fmt ', extensible_fmt_body()),
        chunk(b'fact', struct.pack('<I', 3)),
        chunk(b'LIST', b'INFO'),
        chunk(b'data', bytes(18)),
    )
    return WaveReader(io.BytesIO(data))


def test_text_output_for_minimal_file(minimal_wav):
    reader = WaveReader(io.BytesIO(minimal_wav))
    text = str(reader)
    assert text.startswith("------ Header ------")
    assert "Format:          PCM" in text
    assert "Channels:        2" in text
    assert "Sample Rate:     44100" in text
    assert "Extra Info:      0" in text
    assert "Extended" not in text
    assert "Fact" not in text
    assert "Other Chunks" not in text
    assert text.endswith("Data Length:     4\nPadding Byte:    0")


def test_text_output_sections(full_reader):
    text = format_info(full_reader.descriptor)
    assert "----- Extended -----" in text
    assert "Channel Mask:    0b0000000000000011" in text
    assert "Sub Format:      00000001-0000-0010-8000-00aa00389b71" in text
    assert "Sample Length:   3" in text
    assert "Chunk Ids:       ['LIST']" in text


def test_unknown_format_tag_name():
    data = riff(chunk(b'fmt ', pcm_fmt_body(tag=0x55)), chunk(b'data', b''))
    reader = WaveReader(io.BytesIO(data))
    assert "Format:          Unknown(0x0055)" in format_info(reader.descriptor)


def test_json_output(full_reader):
    parsed = json.loads(format_info(full_reader.descriptor, format_type="json"))
    assert parsed['format']['format_tag'] == 'EXTENSIBLE'
    assert parsed['format']['extension']['speaker_positions'] == ['FrontLeft', 'FrontRight']
    assert parsed['fact']['sample_length'] == 3
    assert parsed['unknown_chunks'] == [{'id': 'LIST', 'size': 4}]
    assert parsed['data'] == {'chunk_size': 18, 'offset': 92, 'pad_byte': False}


def test_dict_without_fact(minimal_wav):
    result = descriptor_to_dict(WaveReader(io.BytesIO(minimal_wav)).descriptor)
    assert result['fact'] is None
    assert 'extension' not in result['format']


def test_unknown_output_format(minimal_wav):
    reader = WaveReader(io.BytesIO(minimal_wav))
    with pytest.raises(ValueError):
        format_info(reader.descriptor, format_type="csv")
