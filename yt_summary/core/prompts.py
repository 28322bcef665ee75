DEFAULT_PROMPT = "以下の字幕を日本語で要約してください。見出しと段落を使って読みやすく整形してください。"

# Used for every chunk on the chunked path
CHUNK_PROMPT = "この部分の内容を簡潔に要約してください。箇条書きや短い段落を使ってください。"

# Appended to the final prompt for the consolidation call
CONSOLIDATION_SUFFIX = (
    "これらの部分要約を統合して、見出しと段落を使った読みやすい全体要約を作成してください。"
    "重要なポイントは箇条書きにしてください。"
)
