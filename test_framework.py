"""
Simple camera script to verify the PoseFramework and the head direction estimate.
Run this script to check that the model, the camera and the aiming work together.
"""
import time
import cv2

from eye_laser.core.pose import estimate_direction, head_center, mirror_pose
from eye_laser.core.pose_framework import PoseFramework
from eye_laser.games.asteroids.game_logic import beam_end


def test_framework():
    """Test the basic functionality of the PoseFramework."""
    print("Testing PoseFramework...")

    try:
        framework = PoseFramework(
            model_path="yolo11n-pose.pt",  # Using the smallest model for quick testing
            confidence_threshold=0.5
        )
        print("✓ Framework initialized successfully")
    except Exception as e:
        print(f"✗ Failed to initialize framework: {str(e)}")
        return False

    try:
        cap = framework.setup_camera(camera_id=0, width=640, height=480)
        print("✓ Camera initialized successfully")
    except Exception as e:
        print(f"✗ Failed to initialize camera: {str(e)}")
        return False

    try:
        print("Processing frames (press 'q' to exit)...")
        fps_history = []
        start_time = time.time()
        frame_count = 0

        while True:
            ret, frame = cap.read()
            if not ret:
                print("✗ Failed to capture frame")
                break

            process_start = time.time()
            poses = framework.process_frame(frame)
            process_time = time.time() - process_start

            frame_count += 1
            elapsed = time.time() - start_time
            if elapsed >= 1.0:
                fps = frame_count / elapsed
                fps_history.append(fps)
                print(f"FPS: {fps:.1f}, Processing time: {process_time*1000:.1f}ms")
                frame_count = 0
                start_time = time.time()

            # Show what the game sees: mirrored image, mirrored poses
            width = frame.shape[1]
            mirrored = [mirror_pose(pose, width) for pose in poses]
            vis_frame = framework.draw_results(cv2.flip(frame, 1), mirrored)

            for pose in mirrored:
                head = head_center(pose)
                direction = estimate_direction(pose)
                if head is None or direction is None:
                    continue
                (hx, hy), _ = head
                ex, ey = beam_end((hx, hy), direction, 200)
                cv2.line(vis_frame, (int(hx), int(hy)), (int(ex), int(ey)), (0, 0, 255), 3)

            stats_text = f"FPS: {fps_history[-1]:.1f}" if fps_history else "FPS: --"
            cv2.putText(vis_frame, stats_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 1, (0, 255, 0), 2)
            cv2.putText(vis_frame, f"Persons: {len(poses)}", (10, 70),
                        cv2.FONT_HERSHEY_SIMPLEX, 1, (0, 255, 0), 2)

            cv2.imshow("PoseFramework Test", vis_frame)

            if cv2.waitKey(1) & 0xFF == ord('q'):
                break

        if fps_history:
            avg_fps = sum(fps_history) / len(fps_history)
            print(f"Average FPS: {avg_fps:.1f}")

        print("✓ Frame processing test completed")
    except Exception as e:
        print(f"✗ Error during frame processing: {str(e)}")
        return False
    finally:
        framework.release()
        cv2.destroyAllWindows()

    return True


if __name__ == "__main__":
    success = test_framework()
    if success:
        print("All checks passed! The framework is working correctly.")
    else:
        print("Some checks failed. Please check the errors above.")
