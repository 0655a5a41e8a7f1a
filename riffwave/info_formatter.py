# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Human-readable rendering of parsed WAV headers.

Pure formatting of an already-parsed WaveDescriptor; no parsing happens here.

Copyright 2025 DNAi inc.
"""

import json
from typing import Any, Dict, List

from riffwave.chunks import WaveDescriptor, format_tag_name


def descriptor_to_dict(descriptor: WaveDescriptor) -> Dict[str, Any]:
    """
    Convert a descriptor to plain, JSON-serializable values.

    Args:
        descriptor: Parsed WAV descriptor

    Returns:
        Nested dictionary with one section per chunk
    """
    fmt = descriptor.format
    result: Dict[str, Any] = {
        'riff_size': descriptor.riff_size,
        'format': {
            'chunk_size': fmt.chunk_size,
            'format_tag': format_tag_name(fmt.format_tag),
            'channels': fmt.channels,
            'sample_rate': fmt.sample_rate,
            'byte_rate': fmt.byte_rate,
            'block_align': fmt.block_align,
            'bits_per_sample': fmt.bits_per_sample,
            'extra_info_size': fmt.extra_info_size,
        },
        'fact': None,
        'unknown_chunks': [
            {'id': chunk.name, 'size': chunk.chunk_size}
            for chunk in descriptor.unknown_chunks
        ],
        'data': {
            'chunk_size': descriptor.data.chunk_size,
            'offset': descriptor.data.offset,
            'pad_byte': descriptor.data.has_pad_byte,
        },
    }
    if fmt.extra_data:
        result['format']['extra_data'] = fmt.extra_data.hex()
    if fmt.extension is not None:
        ext = fmt.extension
        result['format']['extension'] = {
            'valid_bits_per_sample': ext.valid_bits_per_sample,
            'channel_mask': ext.channel_mask,
            'speaker_positions': ext.speaker_positions(),
            'sub_format': str(ext.sub_format),
            'remaining_data': ext.remaining_data.hex(),
        }
    if descriptor.fact is not None:
        result['fact'] = {
            'chunk_size': descriptor.fact.chunk_size,
            'sample_length': descriptor.fact.sample_length,
            'remaining_data': descriptor.fact.remaining_data.hex(),
        }
    return result


def format_info(descriptor: WaveDescriptor, format_type: str = "text") -> str:
    """
    Format a parsed header for display.

    Args:
        descriptor: Parsed WAV descriptor
        format_type: Output format ('text' or 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(descriptor_to_dict(descriptor), indent=2)
    if format_type != "text":
        raise ValueError(f"Unknown format type: {format_type}")

    fmt = descriptor.format
    lines: List[str] = [
        "------ Header ------",
        f"Size:            {descriptor.riff_size}",
        f"Format:          {format_tag_name(fmt.format_tag)}",
        f"Channels:        {fmt.channels}",
        f"Sample Rate:     {fmt.sample_rate}",
        f"Byte Rate:       {fmt.byte_rate}",
        f"Block Align:     {fmt.block_align}",
        f"Bits per Sample: {fmt.bits_per_sample}",
        f"Extra Info:      {fmt.extra_info_size or 0}",
    ]

    if fmt.extension is not None:
        ext = fmt.extension
        lines += [
            "----- Extended -----",
            f"Valid Bits:      {ext.valid_bits_per_sample}",
            f"Channel Mask:    {ext.channel_mask:#018b}",
            f"Sub Format:      {ext.sub_format}",
            f"Remaining Data:  {ext.remaining_data.hex()}",
        ]

    if descriptor.fact is not None:
        lines += [
            "------- Fact -------",
            f"Fact Length:     {descriptor.fact.chunk_size}",
            f"Sample Length:   {descriptor.fact.sample_length}",
            f"Remaining Data:  {descriptor.fact.remaining_data.hex()}",
        ]

    if descriptor.unknown_chunks:
        names = [chunk.name for chunk in descriptor.unknown_chunks]
        lines += [
            "--- Other Chunks ---",
            f"Chunk Ids:       {names}",
        ]

    lines += [
        "------- Data -------",
        f"Data Length:     {descriptor.data.chunk_size}",
        f"Padding Byte:    {int(descriptor.data.has_pad_byte)}",
    ]
    return "\n".join(lines)
