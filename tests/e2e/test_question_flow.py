"""End-to-end tests for questions, answers, votes and comments."""

from uuid import uuid4


class TestAuthentication:
    """Credential handling at the HTTP boundary."""

    def test_mutation_without_credentials_fails(self, client):
        response = client.post(
            "/questions",
            json={
                "title": "Anonymous question title",
                "description": "Anonymous users may not ask questions here.",
            },
        )

        assert response.status_code == 401
        assert "Not authenticated" in response.json()["detail"]

    def test_invalid_token_fails(self, client):
        response = client.get(
            "/users/me", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401

    def test_cookie_credential_is_accepted(self, client, seed_user):
        alice = seed_user("alice")

        response = client.get("/users/me", cookies={"auth_token": alice.token})

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert response.json()["unread_notifications"] == 0


class TestQuestions:
    def test_create_and_fetch_question(self, client, seed_user, ask):
        alice = seed_user("alice")

        question_id = ask(alice)
        response = client.get(f"/questions/{question_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["author_username"] == "alice"
        assert body["answers"] == []
        assert body["user_vote"] is None

    def test_missing_question_is_404(self, client):
        response = client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404

    def test_short_title_is_422(self, client, seed_user):
        alice = seed_user("alice")

        response = client.post(
            "/questions",
            json={"title": "Too short", "description": "x" * 30},
            headers=alice.headers,
        )

        assert response.status_code == 422


class TestAnswers:
    def test_duplicate_answer_is_409(self, client, seed_user, ask, answer):
        # Arrange
        alice, bob = seed_user("alice"), seed_user("bob")
        question_id = ask(alice)
        answer(bob, question_id)

        # Act
        response = client.post(
            "/answers",
            json={"questionId": question_id, "content": "Trying to answer twice."},
            headers=bob.headers,
        )

        # Assert
        assert response.status_code == 409

    def test_answer_to_missing_question_is_404(self, client, seed_user):
        bob = seed_user("bob")

        response = client.post(
            "/answers",
            json={"questionId": str(uuid4()), "content": "Answering into the void."},
            headers=bob.headers,
        )

        assert response.status_code == 404


class TestVotes:
    def test_vote_round_trip(self, client, seed_user, ask, answer):
        # Arrange
        alice, bob, carol = seed_user("alice"), seed_user("bob"), seed_user("carol")
        answer_id = answer(bob, ask(alice))

        # Act
        up = client.post(
            f"/answers/{answer_id}/vote",
            json={"voteType": "upvote"},
            headers=carol.headers,
        )
        removed = client.post(
            f"/answers/{answer_id}/vote",
            json={"voteType": "remove"},
            headers=carol.headers,
        )

        # Assert
        assert up.status_code == 200
        assert up.json()["vote_score"] == 1
        assert up.json()["user_vote"] == "upvote"
        assert removed.json()["vote_score"] == 0
        assert removed.json()["previous_vote"] == "upvote"

    def test_unknown_vote_type_is_400(self, client, seed_user, ask):
        alice, bob = seed_user("alice"), seed_user("bob")
        question_id = ask(alice)

        response = client.post(
            f"/questions/{question_id}/vote",
            json={"voteType": "sideways"},
            headers=bob.headers,
        )

        assert response.status_code == 400

    def test_vote_flood_is_429(self, client, seed_user, ask):
        # Arrange
        alice, bob = seed_user("alice"), seed_user("bob")
        question_id = ask(alice)

        # Act
        statuses = [
            client.post(
                f"/questions/{question_id}/vote",
                json={"voteType": "upvote"},
                headers=bob.headers,
            )
            for _ in range(11)
        ]

        # Assert
        assert [r.status_code for r in statuses[:10]] == [200] * 10
        assert statuses[10].status_code == 429
        assert int(statuses[10].headers["Retry-After"]) > 0


class TestAcceptance:
    def test_only_question_author_may_accept(self, client, seed_user, ask, answer):
        # Arrange
        alice, bob = seed_user("alice"), seed_user("bob")
        answer_id = answer(bob, ask(alice))

        # Act
        denied = client.put(f"/answers/{answer_id}/accept", headers=bob.headers)
        accepted = client.put(f"/answers/{answer_id}/accept", headers=alice.headers)

        # Assert
        assert denied.status_code == 403
        assert accepted.status_code == 200
        assert accepted.json()["is_accepted"] is True
        assert accepted.json()["is_solved"] is True

    def test_accept_under_wrong_question_is_404(self, client, seed_user, ask, answer):
        alice, bob = seed_user("alice"), seed_user("bob")
        answer_id = answer(bob, ask(alice))
        other_question = ask(alice)

        response = client.put(
            f"/answers/{answer_id}/accept",
            json={"questionId": other_question},
            headers=alice.headers,
        )

        assert response.status_code == 404


class TestComments:
    def test_comment_with_mentions(self, client, seed_user, ask, answer):
        # Arrange
        alice, bob, carol = seed_user("alice"), seed_user("bob"), seed_user("carol")
        answer_id = answer(bob, ask(alice))

        # Act
        created = client.post(
            f"/answers/{answer_id}/comments",
            json={"content": "@carol does this hold on 3.13?"},
            headers=alice.headers,
        )
        listed = client.get(f"/answers/{answer_id}/comments")

        # Assert
        assert created.status_code == 201
        assert created.json()["mentions"] == [carol.user_id]
        assert [c["comment_id"] for c in listed.json()["comments"]] == [
            created.json()["comment_id"]
        ]

    def test_comment_on_missing_answer_is_404(self, client, seed_user):
        alice = seed_user("alice")

        response = client.post(
            f"/answers/{uuid4()}/comments",
            json={"content": "hello"},
            headers=alice.headers,
        )

        assert response.status_code == 404
