ENHANCE_TEMPLATE = """\
You are an expert prompt engineer for video generation AI. Rewrite the \
following user prompt to be more descriptive, visual, and detailed to \
produce a high-quality video. Focus on lighting, camera angles, texture, \
and motion. Keep it concise (max 3 sentences). Output ONLY the enhanced \
prompt.

User Prompt: {prompt}"""


def build_enhance_request(prompt: str) -> str:
    return ENHANCE_TEMPLATE.format(prompt=prompt)
