RAG_ANSWER_PROMPT = """
### Question:
{question}

### Context:
{context}
### Instructions:
- Provide a clear and concise response based on the context provided.
- Stay focused on the context and avoid making assumptions beyond the given data.
- Use the context to guide your response and provide a well-reasoned answer.
- Ensure that your response is relevant and addresses the question asked.
- If the question does not relate to the context, answer it as normal."""


def build_answer_prompt(question: str, context_chunks) -> str:
    return RAG_ANSWER_PROMPT.format(question=question, context="\n".join(context_chunks))
