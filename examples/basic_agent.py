#!/usr/bin/env python3
"""
Basic LangChain Agent Example

Demonstrates how to create and use a LangChain agent with Pharos tools.
"""

import asyncio
import os

from dotenv import load_dotenv

from pharos_agent_kit import AgentConfig, PharosAgentKit
from pharos_agent_kit.langchain import create_pharos_agent

# Load environment variables
load_dotenv()


async def main():
    print("Pharos Agent Kit LangChain Example\n")

    # =========================================================================
    # Step 1: Initialize the agent kit
    # =========================================================================
    print("[1] Initializing Pharos Agent Kit...")

    kit = PharosAgentKit.from_private_key(
        os.environ["PHAROS_PRIVATE_KEY"],
        rpc_url=os.environ.get("RPC_URL"),
        config=AgentConfig.from_env(),
    )

    print(f"    [OK] Wallet {kit.wallet_address}\n")

    # =========================================================================
    # Step 2: Create LangChain Agent
    # =========================================================================
    print("[2] Creating LangChain Agent...")

    agent = create_pharos_agent(kit, model="gpt-4o", temperature=0)

    print("    [OK] Agent created with Pharos tools\n")

    # =========================================================================
    # Step 3: Run Example Queries
    # =========================================================================
    print("[3] Running example queries...\n")

    queries = [
        "What's my wallet address?",
        "What is my ETH balance?",
        "What is the TVL of Uniswap?",
        "Find the USDC token on DexScreener",
    ]

    for query in queries:
        print(f"Query: {query}")
        print("-" * 50)

        try:
            response = await agent.ainvoke({"messages": [{"role": "user", "content": query}]})
            print(f"Response: {response['messages'][-1].content}")
        except Exception as e:
            print(f"[ERROR] {e}")

        print("\n")

    # =========================================================================
    # Step 4: Interactive Mode
    # =========================================================================
    print("[4] Interactive Mode (type 'quit' to exit)\n")

    messages = []
    while True:
        try:
            user_input = input("You: ").strip()

            if user_input.lower() in ["quit", "exit", "q"]:
                print("Goodbye!")
                break

            if not user_input:
                continue

            messages.append({"role": "user", "content": user_input})
            response = await agent.ainvoke({"messages": messages})
            messages = response["messages"]
            print(f"Agent: {messages[-1].content}\n")

        except KeyboardInterrupt:
            print("\nGoodbye!")
            break
        except Exception as e:
            print(f"Error: {e}\n")


if __name__ == "__main__":
    asyncio.run(main())
