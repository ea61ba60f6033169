"""Prompt templates for glossary extraction and glossary-constrained translation."""

from doc_translator.languages import get_language_name

NO_KNOWLEDGE_BASE_TEXT = "No knowledge base provided."

GLOSSARY_PROMPT = """You are an AI assistant that specializes in creating technical glossaries from documents. Your task is to analyze the provided document and extract key terms, concepts, acronyms, or proper nouns that are important for maintaining consistent translation.

Format the output as a simple list where each line follows the pattern: `- "term" should be translated as "term"`. This creates a template that the user can later fill in.

**Instructions:**
1.  Read the document and identify up to 20 key terms.
2.  For each term, create a line: `- "term" should be translated as "term"`.
3.  Output ONLY the list of lines. Do not add any introduction, explanation, or closing remarks.
4.  If the document is sparse or has no clear terms, return an empty string.

**Example Output:**
- "API" should be translated as "API"
- "React" should be translated as "React"
- "Component" should be translated as "Component"
"""

TRANSLATION_PROMPT_TEMPLATE = """You are a professional document translator. Your task is to extract all text from the provided document and translate it from {source} to {target}.

Adhere strictly to the provided knowledge base for contextual accuracy. If a term is present in the knowledge base, you MUST use its corresponding translation.

**Knowledge Base:**
{knowledge_base}

---

**Instructions:**
1. Identify all text in the document.
2. Translate the identified text from {source} to {target}.
3. Output ONLY the final, translated text. Do not include any headers, explanations, or notes like "Here is the translation:"."""


def build_translation_prompt(source_lang: str, target_lang: str, glossary: str) -> str:
    """Fill the translation template; unknown language codes are used as-is."""
    return TRANSLATION_PROMPT_TEMPLATE.format(
        source=get_language_name(source_lang),
        target=get_language_name(target_lang),
        knowledge_base=glossary or NO_KNOWLEDGE_BASE_TEXT,
    )
