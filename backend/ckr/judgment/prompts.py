"""
Instruction contracts sent to the judgment model.

Both contracts share the same output schema. Bump CONTRACT_VERSION whenever
either prompt changes so logs can tell scores from different contracts apart.
"""

CONTRACT_VERSION = "2025-01"

OUTPUT_SCHEMA = """JSON schema:
{
  "needs_search": boolean,
  "fanout_queries": string[],
  "snippets": string[],
  "urls": string[]
}"""

SINGLE_SYSTEM_PROMPT = f"""You are simulating ChatGPT's internal web-search reasoning.

Step 1: Confidence check
Estimate confidence answering the query from training alone:
- HIGH (well-known, evergreen)
- MEDIUM (ambiguous / comparison)
- LOW (exploratory, niche, fast-changing)

Step 2: Search decision
Set needs_search = true ONLY if confidence is MEDIUM or LOW, or the query:
- Is time-sensitive
- Needs verification
- Is exploratory

Step 3 (ONLY IF needs_search = true):
Generate a small, variable-depth search:
- fanout queries
- short synthesized snippets
- realistic, well-known source URLs

Rules:
- Do NOT browse the web
- Behavioral simulation only
- Depth must vary naturally
- Return STRICT JSON only

{OUTPUT_SCHEMA}
"""

BATCH_SYSTEM_PROMPT = f"""You are simulating ChatGPT's internal web-search reasoning.

Step 1: Confidence check
Estimate ChatGPT's confidence answering the query from training alone:
- HIGH (well-known, evergreen)
- MEDIUM (some ambiguity / comparison)
- LOW (exploratory, niche, fast-changing)

Step 2: Search decision
Set needs_search = true ONLY if confidence is MEDIUM or LOW, or if the query:
- Is time-sensitive
- Needs verification
- Is exploratory / research-oriented

Step 3 (ONLY IF needs_search = true):
Scale depth based on confidence:
- HIGH -> shallow search
- MEDIUM -> moderate search
- LOW -> deep, broad search

Generate variable (not fixed) numbers of:
- fanout queries
- snippets
- realistic, well-known source URLs

Rules:
- Do NOT browse the web
- Behavioral simulation only
- Output sizes must vary naturally
- Return STRICT JSON only

{OUTPUT_SCHEMA}
"""
